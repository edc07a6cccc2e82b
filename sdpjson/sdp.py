import logging
import re
from typing import List, Optional  # noqa

import attr

from .exceptions import (NumericFormatError, SdpError, StructuralError,
                         TokenCountError)

logger = logging.getLogger('sdp')

DIRECTIONS = [
    'inactive',
    'sendonly',
    'recvonly',
    'sendrecv',
]

INTEGER_RE = re.compile('[0-9]+')


@attr.s(frozen=True)
class Origin:
    """
    The originator of the session and its identifiers, from the `o=` line.
    """
    username = attr.ib()  # type: str
    session_id = attr.ib()  # type: int
    "A unique identifier for the session."
    session_version = attr.ib()  # type: int
    "Incremented each time the session is renegotiated."
    network_type = attr.ib()  # type: str
    ip_type = attr.ib()  # type: str
    ip_address = attr.ib()  # type: str


@attr.s(frozen=True)
class Time:
    """
    The start and stop times of the session, from the `t=` line.

    When both times are zero the session is permanent and :attr:`bounded`
    is `False`.
    """
    start_time = attr.ib()  # type: int
    stop_time = attr.ib()  # type: int
    bounded = attr.ib()  # type: bool


@attr.s(frozen=True)
class Connection:
    network_type = attr.ib(default='')  # type: str
    ip_type = attr.ib(default='')  # type: str
    ip_address = attr.ib(default='')  # type: str


@attr.s(frozen=True)
class Fingerprint:
    """
    The hash of the certificate used for the DTLS handshake.
    """
    type = attr.ib()  # type: str
    "The hash function, for instance `'sha-256'`."
    hash = attr.ib()  # type: str
    "The colon-separated hexadecimal digest."


@attr.s(frozen=True)
class Candidate:
    """
    An ICE candidate, from an `a=candidate:` line.
    """
    component = attr.ib()  # type: int
    "1 for RTP, 2 for RTCP."
    foundation = attr.ib()  # type: str
    transport = attr.ib()  # type: str
    priority = attr.ib()  # type: int
    ip = attr.ib()  # type: str
    port = attr.ib()  # type: int
    type = attr.ib()  # type: str


@attr.s(frozen=True)
class Rtpmap:
    codec = attr.ib()  # type: str
    payload = attr.ib()  # type: str
    rate = attr.ib()  # type: int


@attr.s(frozen=True)
class Fmtp:
    payload = attr.ib()  # type: int
    config = attr.ib()  # type: str


@attr.s(frozen=True)
class RtcFb:
    payload = attr.ib()  # type: str
    "The payload type, or `'*'` for all payload types."
    type = attr.ib()  # type: str


@attr.s(frozen=True)
class Ssrc:
    id = attr.ib()  # type: int
    attribute = attr.ib()  # type: str
    value = attr.ib(default=None)  # type: Optional[str]


def split_lines(sdp):
    """
    Yield the stripped, non-empty lines of `sdp` in order.
    """
    for line in sdp.splitlines():
        line = line.strip()
        if line:
            yield line


def split_line(line):
    if '=' in line:
        key, value = line.split('=', 1)
        return key, value.strip()
    else:
        return line, None


def split_tokens(sdp, name, count, exact=True):
    bits = (sdp or '').split()
    if len(bits) < count or (exact and len(bits) != count):
        raise TokenCountError('%s expects %s%d tokens, got %d' % (
            name,
            '' if exact else 'at least ',
            count,
            len(bits)))
    return bits


def parse_attr(value):
    if ':' in value:
        return value.split(':', 1)
    else:
        return value, None


def parse_int(value, name):
    if value is None or not INTEGER_RE.fullmatch(value):
        raise NumericFormatError('%s must be an integer, got %r' % (name, value))
    return int(value)


def origin_from_sdp(sdp):
    bits = split_tokens(sdp, 'origin', 6)
    return Origin(
        username=bits[0],
        session_id=parse_int(bits[1], 'session id'),
        session_version=parse_int(bits[2], 'session version'),
        network_type=bits[3],
        ip_type=bits[4],
        ip_address=bits[5])


def time_from_sdp(sdp):
    bits = split_tokens(sdp, 'time', 2)
    start_time = parse_int(bits[0], 'start time')
    stop_time = parse_int(bits[1], 'stop time')
    return Time(
        start_time=start_time,
        stop_time=stop_time,
        bounded=not (start_time == 0 and stop_time == 0))


def connection_from_sdp(sdp):
    bits = split_tokens(sdp, 'connection', 3)
    return Connection(
        network_type=bits[0],
        ip_type=bits[1],
        ip_address=bits[2])


def fingerprint_from_sdp(sdp):
    bits = split_tokens(sdp, 'fingerprint', 2)
    return Fingerprint(type=bits[0], hash=bits[1])


def media_from_sdp(sdp):
    bits = split_tokens(sdp, 'media', 4, exact=False)

    # only the first format is kept
    return MediaDescription(
        type=bits[0],
        port=parse_int(bits[1], 'port'),
        protocol=bits[2],
        payloads=bits[3])


def candidate_from_sdp(sdp):
    bits = split_tokens(sdp, 'candidate', 8, exact=False)
    if bits[6] != 'typ':
        raise TokenCountError('candidate expects "typ" as seventh token, got %r' % bits[6])

    # extensions after the type are dropped
    return Candidate(
        component=parse_int(bits[1], 'component'),
        foundation=bits[0],
        transport=bits[2],
        priority=parse_int(bits[3], 'priority'),
        ip=bits[4],
        port=parse_int(bits[5], 'port'),
        type=bits[7])


def rtpmap_from_sdp(sdp):
    payload, encoding = split_tokens(sdp, 'rtpmap', 2)
    bits = encoding.split('/')
    if len(bits) < 2:
        raise TokenCountError('rtpmap encoding expects codec/rate, got %r' % encoding)
    return Rtpmap(
        codec=bits[0],
        payload=payload,
        rate=parse_int(bits[1], 'clock rate'))


def fmtp_from_sdp(sdp):
    bits = (sdp or '').split(None, 1)
    if len(bits) != 2:
        raise TokenCountError('fmtp expects a payload type and parameters')
    return Fmtp(
        payload=parse_int(bits[0], 'payload type'),
        config=bits[1])


def rtcp_feedback_from_sdp(sdp):
    bits = split_tokens(sdp, 'rtcp-fb', 2, exact=False)
    return RtcFb(payload=bits[0], type=bits[1])


def ssrc_from_sdp(sdp):
    bits = (sdp or '').split(None, 1)
    if len(bits) != 2:
        raise TokenCountError('ssrc expects an id and an attribute')
    ssrc_attr, ssrc_value = parse_attr(bits[1])
    return Ssrc(
        id=parse_int(bits[0], 'ssrc'),
        attribute=ssrc_attr,
        value=ssrc_value)


# attribute name -> (list on the media, decoder)
MEDIA_ATTRIBUTES = {
    'candidate': ('candidates', candidate_from_sdp),
    'fmtp': ('fmtp', fmtp_from_sdp),
    'rtcp-fb': ('rtc_fb', rtcp_feedback_from_sdp),
    'rtpmap': ('rtpmap', rtpmap_from_sdp),
    'ssrc': ('ssrc', ssrc_from_sdp),
}


@attr.s(frozen=True)
class MediaDescription:
    """
    A media block, from its `m=` line up to the next `m=` line.
    """
    type = attr.ib()  # type: str
    "The media type, for instance `'audio'` or `'video'`."
    port = attr.ib()  # type: int
    protocol = attr.ib()  # type: str
    payloads = attr.ib()  # type: str
    "The first format listed on the `m=` line."
    candidates = attr.ib(default=attr.Factory(list))  # type: List[Candidate]
    direction = attr.ib(default=None)  # type: Optional[str]
    "One of :data:`DIRECTIONS`, or `None` if the media carries no direction."
    fmtp = attr.ib(default=attr.Factory(list))  # type: List[Fmtp]
    ptime = attr.ib(default=0)  # type: int
    rtpmap = attr.ib(default=attr.Factory(list))  # type: List[Rtpmap]
    rtc_fb = attr.ib(default=attr.Factory(list))  # type: List[RtcFb]
    ssrc = attr.ib(default=attr.Factory(list))  # type: List[Ssrc]


def parse_attribute(fields, name, value):
    media = fields['media']

    # session-wide, whatever the scope
    if name == 'ice-ufrag':
        fields['ice_ufrag'] = value or ''
    elif name == 'ice-pwd':
        fields['ice_pwd'] = value or ''
    elif name == 'fingerprint':
        fields['fingerprint'] = fingerprint_from_sdp(value)
    elif name not in DIRECTIONS and name != 'ptime' and name not in MEDIA_ATTRIBUTES:
        logger.debug('skipping attribute %r', name)
    elif not media:
        logger.debug('skipping attribute %r outside of a media block', name)
    elif name in DIRECTIONS:
        media[-1] = attr.evolve(media[-1], direction=name)
    elif name == 'ptime':
        media[-1] = attr.evolve(media[-1], ptime=parse_int(value, 'ptime'))
    else:
        field, decoder = MEDIA_ATTRIBUTES[name]
        getattr(media[-1], field).append(decoder(value))


@attr.s(frozen=True)
class SessionDescription:
    """
    The :class:`SessionDescription` describes a whole SDP message.

    Use :meth:`parse` to build one from text.
    """
    version = attr.ib(default=0)  # type: int
    session_name = attr.ib(default='')  # type: str
    ice_ufrag = attr.ib(default='')  # type: str
    ice_pwd = attr.ib(default='')  # type: str
    fingerprint = attr.ib(default=None)  # type: Optional[Fingerprint]
    origin = attr.ib(default=None)  # type: Origin
    time = attr.ib(default=None)  # type: Time
    connection = attr.ib(default=attr.Factory(Connection))  # type: Connection
    media = attr.ib(default=attr.Factory(list))  # type: List[MediaDescription]

    @classmethod
    def parse(cls, sdp):
        """
        Parse the SDP message `sdp`.

        Raises a :class:`~sdpjson.exceptions.SdpError` subclass if the message
        is malformed, in which case no description is returned.
        """
        # the current media block is always fields['media'][-1]
        fields = {'media': []}

        for line in split_lines(sdp):
            key, value = split_line(line)
            try:
                if key == 'm':
                    fields['media'].append(media_from_sdp(value))
                    logger.debug('media %d: %s', len(fields['media']) - 1, fields['media'][-1].type)
                elif key == 'a':
                    attr_name, attr_value = parse_attr(value)
                    parse_attribute(fields, attr_name, attr_value)
                elif key in DIRECTIONS and value is None:
                    parse_attribute(fields, key, None)
                elif key == 'v':
                    fields['version'] = parse_int(value, 'version')
                elif key == 'o':
                    fields['origin'] = origin_from_sdp(value)
                elif key == 's':
                    fields['session_name'] = value
                elif key == 't':
                    fields['time'] = time_from_sdp(value)
                elif key == 'c':
                    if not fields['media']:
                        fields['connection'] = connection_from_sdp(value)
                else:
                    logger.debug('skipping line %r', line)
            except SdpError as exc:
                exc.line = line
                raise

        if 'origin' not in fields:
            raise StructuralError('missing origin (o=) line')
        if 'time' not in fields:
            raise StructuralError('missing time (t=) line')

        return cls(**fields)
