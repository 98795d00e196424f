from comparers.text import TextBasedComparer, TextComparer, compare_text
from comparers.numbered_text import NumberedTextComparer
from comparers.datetime_text import DatetimeTextComparer, datetime_from_str
from comparers.path import PathComparer, path_components
from comparers.ip import IpComparer, compare_ip_addresses, parse_ip_address
from comparers.network import NetworkComparer, parse_network

__all__ = [
    "TextBasedComparer",
    "TextComparer",
    "compare_text",
    "NumberedTextComparer",
    "DatetimeTextComparer",
    "datetime_from_str",
    "PathComparer",
    "path_components",
    "IpComparer",
    "compare_ip_addresses",
    "parse_ip_address",
    "NetworkComparer",
    "parse_network",
]
