from saberbot.services.knowledge_base import KnowledgeBase
from saberbot.services.prompt_service import (
    CONTEXT_END,
    CONTEXT_START,
    PERSONA,
    PRICING_REDIRECT,
    RULES,
    TECHNICIANS_CONTACT,
    build_prompt,
)


def test_prompt_sections_appear_in_fixed_order():
    knowledge_base = KnowledgeBase(text="Scheda tecnica: idropittura traspirante.")

    prompt = build_prompt(knowledge_base, "Quale idropittura per il bagno?")

    positions = [
        prompt.index(PERSONA),
        prompt.index("REGOLE FONDAMENTALI:"),
        *(prompt.index(f"{number}. {rule}") for number, rule in enumerate(RULES, start=1)),
        prompt.index(CONTEXT_START),
        prompt.index(knowledge_base.text),
        prompt.index(CONTEXT_END),
        prompt.index("DOMANDA UTENTE: Quale idropittura per il bagno?"),
    ]
    assert positions == sorted(positions)
    assert prompt.endswith("RISPOSTA TECNICA:")


def test_rules_carry_the_canned_sentences():
    assert len(RULES) == 5
    assert PRICING_REDIRECT in RULES[0]
    assert '"Ciao" o "Buongiorno"' in RULES[2]
    assert TECHNICIANS_CONTACT in RULES[3]
    assert "0375 782083" in TECHNICIANS_CONTACT


def test_empty_knowledge_base_keeps_the_context_markers():
    prompt = build_prompt(KnowledgeBase(), "Ciao")

    assert f"{CONTEXT_START}\n\n{CONTEXT_END}" in prompt


def test_prompt_is_rebuilt_for_each_message():
    knowledge_base = KnowledgeBase(text="KB")

    first = build_prompt(knowledge_base, "uno")
    second = build_prompt(knowledge_base, "due")

    assert first != second
    assert first.replace("uno", "due") == second
