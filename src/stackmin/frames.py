"""
Stack frame recognizer.

Turns one line of a Dart VM (Dartium) or dart2js stack trace into a
structured frame: method, location stripped of the extension origin, and
whether the location points into the SDK or a dependency package.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

ANON_CLOSURE = "<anonymous closure>"
ANON_PLACEHOLDER = "<anon>"

# dart: is the SDK, package: is a pub dependency
INTERNAL_PREFIXES: tuple[str, ...] = ("dart:", "package:")

_EXT_PREFIX = re.compile(r"chrome-extension://[a-z0-9]+/")

# ── Dartium ───────────────────────────────────────────────────────
# #0      main.<anonymous closure> (chrome-extension://ldgid.../test/utils_test.dart:35:9)
# #2      _Future._propagateToListeners (dart:async/future_impl.dart:445)
_DARTIUM_FRAME = re.compile(r"#\d+\s+([\S ]+) \((\S+)\)")

# ── dart2js ───────────────────────────────────────────────────────
# at Object.wrapException (chrome-extension://aadc.../spark.dart.precompiled.js:2646:13)
# at Closure$0._asyncRunCallback [as call$0] (chrome-extension://ldgi.../spark.dart.precompiled.js:15853:18)
_DART2JS_FRAME = re.compile(r"at (\S+) \((\S+)\)")
_DART2JS_ANNOTATED_FRAME = re.compile(r"at (\S+) (\[.+\]) \((\S+)\)")


@dataclass(frozen=True)
class Frame:
    raw_text: str
    method: Optional[str] = None
    location: Optional[str] = None
    is_internal: bool = False

    @property
    def recognized(self) -> bool:
        return self.method is not None

    def render(self) -> str:
        if not self.recognized:
            return self.raw_text
        return f"{self.method} {self.location}"

    def to_dict(self) -> dict:
        return {
            "raw_text": self.raw_text,
            "method": self.method,
            "location": self.location,
            "is_internal": self.is_internal,
        }


Matcher = Callable[[str], Optional[tuple[str, str]]]


def _match_dartium(line: str) -> Optional[tuple[str, str]]:
    m = _DARTIUM_FRAME.search(line)
    if m is None:
        return None
    return m.group(1), m.group(2)


def _match_dart2js(line: str) -> Optional[tuple[str, str]]:
    m = _DART2JS_FRAME.search(line)
    if m is None:
        return None
    return m.group(1), m.group(2)


def _match_dart2js_annotated(line: str) -> Optional[tuple[str, str]]:
    m = _DART2JS_ANNOTATED_FRAME.search(line)
    if m is None:
        return None
    # the "[as call$0]" alias is dropped
    return m.group(1), m.group(3)


# Tried in order, first match wins.
MATCHERS: tuple[Matcher, ...] = (
    _match_dartium,
    _match_dart2js,
    _match_dart2js_annotated,
)


def strip_extension_prefix(location: str) -> str:
    """Remove the first ``chrome-extension://<id>/`` origin from a location."""
    return _EXT_PREFIX.sub("", location, count=1)


def is_internal_location(location: str, internal_prefixes: tuple[str, ...] = INTERNAL_PREFIXES) -> bool:
    return location.startswith(tuple(internal_prefixes))


def recognize(line: str, internal_prefixes: tuple[str, ...] = INTERNAL_PREFIXES) -> Frame:
    """Recognize a single trimmed trace line.

    Never fails: a line no grammar matches comes back as a pass-through
    frame with no method or location.
    """
    for matcher in MATCHERS:
        found = matcher(line)
        if found is None:
            continue
        method, location = found
        method = method.replace(ANON_CLOSURE, ANON_PLACEHOLDER)
        location = strip_extension_prefix(location)
        return Frame(
            raw_text=line,
            method=method,
            location=location,
            is_internal=is_internal_location(location, internal_prefixes),
        )
    return Frame(raw_text=line)
