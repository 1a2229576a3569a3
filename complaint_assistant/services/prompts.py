from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from complaint_assistant.schemas.inputs import Mode

CLOSING_PHRASE = "Met Vriendelijke Groeten"

SYSTEM_PROMPT = (
    "Je bent een professionele klantenservice medewerker die expert is in het behandelen van "
    "klachtenbrieven in het Nederlands. "
    "Je communiceert altijd beleefd, empathisch en oplossingsgericht. "
    "Je gebruikt een professionele maar toegankelijke schrijfstijl."
)

REWRITE_PROMPT = (
    "Herschrijf deze klachtenbrief of bericht professioneel en duidelijk. Instructies:\n"
    "- Behoud de kernboodschap en belangrijke feiten\n"
    "- Verbeter de toon naar professioneel en respectvol\n"
    "- Structureer de brief logisch met inleiding, kern en afsluiting\n"
    "- Structureer met achtergrond/feiten, oorzaak, getroffen maatregelen om herhaling te voorkomen\n"
    "- Gebruik correcte spelling en grammatica\n"
    "- Maak de tekst beknopt maar volledig\n"
    "- Geen informatie uitvinden. Als je de informatie niet hebt plaats [xx] met daarin de informatie "
    "die door de gebruiker moet worden aangevuld\n"
    "- Gebruik steeds als afsluiting: {closing}\n\n"
    "De brief:\n"
    "{text}"
)

RESPONSE_PROMPT = (
    "Schrijf een professioneel antwoord op deze klachtenbrief. Instructies:\n"
    "- Begin met begrip tonen voor de situatie\n"
    "- Behandel elk genoemd punt serieus\n"
    "- Structureer met achtergrond/feiten, oorzaak, getroffen maatregelen om herhaling te voorkomen\n"
    "- Sluit af met een constructieve toon\n"
    "- Gebruik een empathische maar professionele schrijfstijl\n"
    "- Voeg een passende aanhef\n"
    "- Gebruik steeds als afsluiting: {closing}\n\n"
    "De klachtenbrief:\n"
    "{text}"
)

# Used by the /api/test-prompts diagnostic
SAMPLE_LETTER = """
Beste,

Ik schrijf deze brief omdat ik erg ontevreden ben over de levering van mijn nieuwe windsurfplank.
De plank die ik op 15 november heb besteld, zou binnen 5 werkdagen geleverd worden, maar na 2 weken
heb ik nog steeds niks ontvangen! Ik heb al 3x gebeld maar krijg steeds andere verhalen te horen.
Dit is echt belachelijk! Ik heb wel 899 euro betaald en dan verwacht ik ook gewoon goede service.

Ik wil nu eindelijk weten waar mijn plank blijft en wanneer ik hem krijg. Als dit nog langer duurt
wil ik mijn geld terug! En ik ga zeker een slechte review achterlaten op alle websites.

gr,
Jan Jansen"""


@dataclass(frozen=True)
class PromptPair:
    system_instruction: str
    user_instruction: str


def build_prompts(text: str, mode: Mode) -> PromptPair:
    match mode:
        case Mode.REWRITE:
            template = REWRITE_PROMPT
        case Mode.RESPONSE:
            template = RESPONSE_PROMPT
        case _:
            assert_never(mode)

    # str.replace rather than .format so braces in the letter are left alone
    user = template.replace("{closing}", CLOSING_PHRASE).replace("{text}", text)
    return PromptPair(system_instruction=SYSTEM_PROMPT, user_instruction=user)
