from __future__ import annotations
import os

# where dictionary files live, relative to the working directory
DICTIONARY_DIR: str = "dictionaries"
DICTIONARY_EXT: str = ".txt"
ENCODING: str = "utf-8"

# reference bootstrap
DEFAULT_DICTIONARY: str = "large"
DEFAULT_THRESHOLD: int = 2

# /* ~~~ prompt loop wording (stdout protocol, keep exact) ~~~ */
PROMPT: str = "Enter a word: "
MSG_NO_MATCHES: str = "No matches found."
MSG_VALID_WORD: str = "Already a valid word"
MSG_SUGGESTIONS: str = "Suggestions:"

# INFO logging to stderr (set AUTOCORRECT_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("AUTOCORRECT_VERBOSE") == "1"
