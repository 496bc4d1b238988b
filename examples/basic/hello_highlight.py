"""Highlight a snippet with a bundled language in 3 lines — zero deps."""

from resalta import HtmlTarget
from resalta.languages import highlight_language

tokens = highlight_language("brainheck", "++[>+<-] add two cells")
print(HtmlTarget(prefix="<pre><code>", suffix="</code></pre>").build(tokens or []))
