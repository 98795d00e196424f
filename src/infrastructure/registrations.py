"""
Central wiring: register all sort strategy handlers.

To add a new strategy, add one ``register()`` call below.  This module is
imported (as a side-effect) by ``registry.get_handler`` to ensure handlers
are available before first use.
"""
from core.strategy import Strategy
from infrastructure.registry import register, StrategyHandler

from comparers.text import TextComparer
from comparers.numbered_text import NumberedTextComparer
from comparers.datetime_text import DatetimeTextComparer
from comparers.path import PathComparer
from comparers.ip import IpComparer
from comparers.network import NetworkComparer


# ---- Text ----
register(Strategy.TEXT, StrategyHandler(
    description="Sort the file as text according to the specified locale.",
    build=lambda collator, case_insensitive, _flavor: TextComparer(collator, case_insensitive),
))

# ---- Numbered text ----
register(Strategy.NUMBERED_TEXT, StrategyHandler(
    description=(
        "Sort the file assuming that each line starts with a numeric prefix, "
        "then fall back to sorting by text according to the specified locale."
    ),
    build=lambda collator, case_insensitive, _flavor: NumberedTextComparer(collator, case_insensitive),
))

# ---- Datetime text ----
register(Strategy.DATETIME_TEXT, StrategyHandler(
    description=(
        "Sort the file assuming that each line starts with a date or datetime prefix, "
        "then fall back to sorting by text according to the specified locale."
    ),
    build=lambda collator, case_insensitive, _flavor: DatetimeTextComparer(collator, case_insensitive),
))

# ---- Path ----
register(Strategy.PATH, StrategyHandler(
    description=(
        "Sort the file assuming that each line is a path, "
        "sorted so that deeper paths come after shorter."
    ),
    build=lambda collator, case_insensitive, flavor: PathComparer(collator, case_insensitive, flavor),
))

# ---- IP ----
register(Strategy.IP, StrategyHandler(
    description="Sort the file assuming that each line is an IP address.",
    build=lambda _collator, _case_insensitive, _flavor: IpComparer(),
))

# ---- Network ----
register(Strategy.NETWORK, StrategyHandler(
    description="Sort the file assuming that each line is a network in CIDR form.",
    build=lambda _collator, _case_insensitive, _flavor: NetworkComparer(),
))
