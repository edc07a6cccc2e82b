# flake8: noqa

from .exceptions import (NumericFormatError, SdpError, StructuralError,
                         TokenCountError)
from .sdp import (Candidate, Connection, Fingerprint, Fmtp, MediaDescription,
                  Origin, RtcFb, Rtpmap, SessionDescription, Ssrc, Time)
from .serialization import (description_to_dict, description_to_json,
                            sdp_to_json)

parse_sdp = SessionDescription.parse
