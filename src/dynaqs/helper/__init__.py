from .timeutil import parse_date, datetime_to_isostring
from .qsutil import group_query_items, parse_query_string
