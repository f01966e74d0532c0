"""Guide tab with a short description of the rewrites."""

from __future__ import annotations

from textual.containers import ScrollableContainer
from textual.widgets import Static

GUIDE_TEXT = r"""How pasting works

1. Pasted text longer than the size limit (counted in characters; an
   emoji is one character) is rejected.
2. Math delimiters are rewritten:
     \( x \)  and  \(x\)   ->  $x$
     \[ x \]  and  \[x\]   ->  $$x$$
3. Custom replacements run in order; each one sees the output of the
   previous one. "from" is matched literally, so "a.b" only matches "a.b".
4. With "Confirm before pasting" on, a prompt asks before inserting.
   Closing the prompt with Escape cancels the paste.

Replacements are edited as JSON, for example:
  [{"from": "[Advanced]", "to": "[Basic]"}]
Invalid JSON is rejected and the last valid list stays in effect.
"""


class GuideTab(ScrollableContainer):
    def compose(self):
        yield Static(GUIDE_TEXT, markup=False, classes="guide")
