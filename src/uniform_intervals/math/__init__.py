"""Import definitions for normalizing the boundaries of integer and floating-point intervals."""

from .bounds import NormalizedRange as NormalizedRange
from .bounds import lower_bound as lower_bound
from .bounds import normalize_interval as normalize_interval
from .bounds import upper_bound as upper_bound
from .intervals import INTERVAL_CLOSED as INTERVAL_CLOSED
from .intervals import INTERVAL_CLOSED_CLOSED as INTERVAL_CLOSED_CLOSED
from .intervals import INTERVAL_CLOSED_OPEN as INTERVAL_CLOSED_OPEN
from .intervals import INTERVAL_OPEN as INTERVAL_OPEN
from .intervals import INTERVAL_OPEN_CLOSED as INTERVAL_OPEN_CLOSED
from .intervals import INTERVAL_OPEN_OPEN as INTERVAL_OPEN_OPEN
from .intervals import IntervalKind as IntervalKind
from .intervals import SemanticInterval as SemanticInterval
from .numeric import NumericDomain as NumericDomain
from .numeric import next_after as next_after
from .numeric import numeric_domain as numeric_domain
