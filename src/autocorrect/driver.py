from __future__ import annotations
import logging
import sys
from typing import List, Sequence, TextIO

from . import config as CFG
from .engine import Engine
from .models import Suggestion

log = logging.getLogger(__name__)


def respond(suggestions: Sequence[Suggestion]) -> List[str]:
    """
    Output lines for one query. Exactly one shape:
      - "No matches found."          nothing within threshold
      - "Already a valid word"       top hit is at distance 0
      - "Suggestions:" + one word per line, in ranked order
    """
    if not suggestions:
        return [CFG.MSG_NO_MATCHES]
    if suggestions[0].distance == 0:
        return [CFG.MSG_VALID_WORD]
    return [CFG.MSG_SUGGESTIONS, *(s.word for s in suggestions)]


def _strip_eol(line: str) -> str:
    # the query is verbatim apart from its line terminator
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def run(engine: Engine, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """
    Prompt loop: print the prompt, read a line, print the response.
    Returns 0 once stdin is exhausted.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    served = 0
    while True:
        print(CFG.PROMPT, file=stdout, flush=True)
        raw = stdin.readline()
        if raw == "":
            break
        typed = _strip_eol(raw)
        for line in respond(engine.rank(typed)):
            print(line, file=stdout)
        served += 1

    log.info("End of input after %d queries", served)
    return 0
