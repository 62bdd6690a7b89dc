from .config import FormatOptions, get_buffer, logger
from .constants import Character
from .converter import number_to_string, to_list
from .funcs import escape_param_value, escape_text, fold_line, split_by_length
from .time_funcs import format_date, format_date_time
