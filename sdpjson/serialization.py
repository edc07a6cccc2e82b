import json

import attr

from .sdp import SessionDescription


def description_to_dict(description):
    """
    Convert a :class:`SessionDescription` to plain dicts and lists.

    Unset optional fields are kept as `None`, empty sequences as `[]`.
    """
    return attr.asdict(description)


def description_to_json(description, indent=None, sort_keys=False):
    return json.dumps(description_to_dict(description), indent=indent, sort_keys=sort_keys)


def sdp_to_json(sdp, indent=None, sort_keys=False):
    """
    Parse the SDP message `sdp` and return its JSON representation.
    """
    return description_to_json(
        SessionDescription.parse(sdp),
        indent=indent,
        sort_keys=sort_keys)
