"""Key-name markers that raise the severity of a capability difference."""

from __future__ import annotations

import re

# Case-sensitive substring match on the capability key.
HIGH_SEVERITY_KEY_MARKERS = re.compile(r"(security|auth)")
