"""Extract ``ActivityInfo`` records from host chat messages.

Activity messages carry their details in a ``Dictionary`` list of small
mappings, e.g.::

    {
        "Type": "Activity",
        "Content": "ChatOther-ItemMouth-Kiss",
        "Dictionary": [
            {"SourceCharacter": 1001},
            {"TargetCharacter": 2002},
            {"Tag": "FocusAssetGroup", "FocusGroupName": "ItemMouth"},
            {"ActivityName": "Kiss"},
        ],
    }

Messages that are not activities, or that lack the fields needed to
route them, yield ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from activity_events.models.activity import ActivityInfo

logger = logging.getLogger(__name__)

ACTIVITY_MESSAGE_TYPE = "Activity"

_FIELD_KEYS = (
    "SourceCharacter",
    "TargetCharacter",
    "ActivityName",
    "FocusGroupName",
    "AssetName",
)

# Content tags look like "ChatOther-<group>-<activity>" or "ChatSelf-<group>-<activity>"
_CONTENT_PREFIXES = ("ChatOther", "ChatSelf")


def _fields_from_content(content: Any) -> dict[str, str]:
    if not isinstance(content, str):
        return {}
    parts = content.split("-")
    if len(parts) != 3 or parts[0] not in _CONTENT_PREFIXES:
        return {}
    return {"FocusGroupName": parts[1], "ActivityName": parts[2]}


def parse_activity_info(message: Mapping[str, Any], sender_id: Any = None) -> ActivityInfo | None:
    """Build an ``ActivityInfo`` from *message*, or return ``None``.

    Parameters
    ----------
    message:
        The raw host chat message.
    sender_id:
        Id of the character that sent the message.  Used as the source
        when the dictionary does not name one.
    """
    if message.get("Type") != ACTIVITY_MESSAGE_TYPE:
        return None

    dictionary = message.get("Dictionary")
    if not isinstance(dictionary, list):
        logger.debug("Activity message without a dictionary: %r", message.get("Content"))
        return None

    fields: dict[str, Any] = _fields_from_content(message.get("Content"))
    for item in dictionary:
        if not isinstance(item, Mapping):
            continue
        for key in _FIELD_KEYS:
            if key in item:
                fields[key] = item[key]

    if fields.get("SourceCharacter") is None:
        fields["SourceCharacter"] = sender_id
    if fields["SourceCharacter"] is None or fields.get("TargetCharacter") is None:
        logger.debug("Activity message without source/target: %r", message.get("Content"))
        return None

    try:
        return ActivityInfo.model_validate(fields)
    except ValidationError as exc:
        logger.debug("Malformed activity message %r: %s", message.get("Content"), exc)
        return None
