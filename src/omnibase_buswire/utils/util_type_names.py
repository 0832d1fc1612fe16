# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Type identity helpers.

Type identities are dotted, fully qualified names such as
``Sample.Events.IAccountSignedUpIntegrationEvent.V1``. Hosts sometimes
report them with a ``global::`` alias prefix or with ``+`` separating nested
types; ``normalize_type_identity`` folds those spellings into the dotted
form so identities compare by plain string equality everywhere else.
"""

from __future__ import annotations

_GLOBAL_ALIAS_PREFIX = "global::"


def normalize_type_identity(identity: str) -> str:
    """Return the canonical dotted spelling of a type identity.

    Example:
        >>> normalize_type_identity("global::Sample.Events.IGroup+V1")
        'Sample.Events.IGroup.V1'
    """
    normalized = identity.strip()
    if normalized.startswith(_GLOBAL_ALIAS_PREFIX):
        normalized = normalized[len(_GLOBAL_ALIAS_PREFIX) :]
    return normalized.replace("+", ".")


def simple_type_name(identity: str) -> str:
    """Return the last segment of a dotted type identity.

    Example:
        >>> simple_type_name("Sample.Events.OrderPlacedMessage")
        'OrderPlacedMessage'
    """
    return identity.rsplit(".", 1)[-1]


__all__: list[str] = ["normalize_type_identity", "simple_type_name"]
