"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal, TypeAlias

MemberKind: TypeAlias = Literal["constructor", "method"]

# None means the formal parameter types are unknown.
ParamTypes: TypeAlias = Sequence[type] | None

# None means the call has no arguments.
Params: TypeAlias = Sequence[Any] | None
