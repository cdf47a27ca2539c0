"""Advisor configuration constants.

Every generation call shares these values; nothing else in the package
spells out sampling or safety literals.
"""

from ..llm.models import GenerationSettings, HarmBlockThreshold, HarmCategory, SafetySetting

ADVISOR_SAFETY_SETTINGS = tuple(
    SafetySetting(category=category, threshold=HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE)
    for category in (
        HarmCategory.HARASSMENT,
        HarmCategory.HATE_SPEECH,
        HarmCategory.SEXUALLY_EXPLICIT,
        HarmCategory.DANGEROUS_CONTENT,
    )
)

ADVISOR_GENERATION = GenerationSettings(
    temperature=0.6,
    top_k=1,
    top_p=0.9,
    max_output_tokens=2048,
    safety_settings=ADVISOR_SAFETY_SETTINGS,
    # Thinking tokens count toward max_output_tokens on 2.5 models
    thinking_budget=0,
)

# Substituted when the backend answers with no text
UNABLE_TO_ANSWER_TEXT = (
    "I'm unable to answer that at the moment. Try rephrasing your question."
)

# Substituted when the remote call fails for any reason
APOLOGY_TEXT = (
    "I'm currently unable to assist with this specific query. "
    "Please try a different question or rephrase your query."
)

TIMESTAMP_FORMAT = "%H:%M:%S"
