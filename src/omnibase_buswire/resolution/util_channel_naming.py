# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Channel and endpoint naming rules.

IMPORTANT: these functions are the only place default endpoint names and
inferred channel names are built. Emitters must never re-derive names.
"""

from __future__ import annotations

import re

from omnibase_buswire.utils import simple_type_name

DEFAULT_ENDPOINT_SUFFIX: str = "subscription"

# Checked in order; at most one is stripped.
INFERENCE_STRIPPED_SUFFIXES: tuple[str, ...] = ("event", "message")

_CAMEL_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def default_endpoint_name(service_name: str) -> str:
    """Build the default endpoint name of a service.

    Example:
        >>> default_endpoint_name("account-service")
        'account-service-subscription'
    """
    return f"{service_name}-{DEFAULT_ENDPOINT_SUFFIX}"


def infer_channel_name(message_type_identity: str) -> str:
    """Infer a channel name from a message type's simple name.

    A trailing ``Event`` or ``Message`` (any case) is removed, camel-case
    word boundaries become dashes and the result is lower-cased. Returns an
    empty string when nothing is left, e.g. for a type named ``Event``.

    Example:
        >>> infer_channel_name("Sample.Events.AccountSignedUpEvent")
        'account-signed-up'
        >>> infer_channel_name("OrderPlacedMessage")
        'order-placed'
        >>> infer_channel_name("UserLoggedIn")
        'user-logged-in'
    """
    name = simple_type_name(message_type_identity)
    lowered = name.lower()
    for suffix in INFERENCE_STRIPPED_SUFFIXES:
        if lowered.endswith(suffix):
            name = name[: -len(suffix)]
            break
    return _CAMEL_CASE_BOUNDARY.sub(r"\1-\2", name).lower()


__all__: list[str] = [
    "DEFAULT_ENDPOINT_SUFFIX",
    "INFERENCE_STRIPPED_SUFFIXES",
    "default_endpoint_name",
    "infer_channel_name",
]
