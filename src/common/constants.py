"""Shared constants for highlight-lexicon.

For environment-based configuration (paths, languages, credentials), use the
env module:
    from common.env import env
    api_key = env.openai_api_key()
"""

# Line separating two entries in the e-reader's export
CLIPPING_DELIMITER = "=========="

# Non-blank lines an export block needs: attribution, location, text
CLIPPING_MIN_LINES = 3

# Staging list header
HEADER_MARKER = "# "
HEADER_FIELD_SEPARATOR = " | "
LAST_PROCESSED_LABEL = "Last processed"
TRANSLATE_FROM_LABEL = "Translate from"

# Index value meaning "nothing recorded yet"
UNSET_INDEX = -1

# Placeholders stored in the result table when a translation is missing
TRANSLATION_ERROR_SENTINEL = "[translation error]"
TRANSLATION_EMPTY_SENTINEL = "[translation failed]"

RESULT_DELIMITER = ","
