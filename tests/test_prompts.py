import pytest

from complaint_assistant.schemas.inputs import Mode
from complaint_assistant.services.prompts import CLOSING_PHRASE, SYSTEM_PROMPT, build_prompts


@pytest.mark.parametrize("mode", list(Mode))
def test_text_embedded_verbatim(mode, sample_letter):
    pair = build_prompts(sample_letter, mode)
    assert pair.system_instruction == SYSTEM_PROMPT
    assert pair.user_instruction.endswith(sample_letter)


@pytest.mark.parametrize("mode", list(Mode))
def test_closing_phrase_is_last_instruction(mode, sample_letter):
    user = build_prompts(sample_letter, mode).user_instruction
    instructions = [line for line in user.splitlines() if line.startswith("- ")]
    assert instructions[-1] == f"- Gebruik steeds als afsluiting: {CLOSING_PHRASE}"


def test_rewrite_prompt():
    user = build_prompts("tekst", Mode.REWRITE).user_instruction
    assert user.startswith("Herschrijf deze klachtenbrief")
    assert "[xx]" in user
    assert "De brief:\ntekst" in user


def test_response_prompt():
    user = build_prompts("tekst", Mode.RESPONSE).user_instruction
    assert user.startswith("Schrijf een professioneel antwoord")
    assert "Voeg een passende aanhef" in user
    assert "De klachtenbrief:\ntekst" in user


def test_braces_in_letter_are_kept():
    letter = "Bestelling {12345} en {text} kwam niet"
    assert build_prompts(letter, Mode.REWRITE).user_instruction.endswith(letter)


def test_deterministic(sample_letter):
    assert build_prompts(sample_letter, Mode.RESPONSE) == build_prompts(sample_letter, Mode.RESPONSE)


def test_system_prompt_persona():
    assert "klantenservice" in SYSTEM_PROMPT
    assert "empathisch" in SYSTEM_PROMPT
