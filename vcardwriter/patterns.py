import re

# vCard text may arrive with any of the three newline conventions
patterns = {"newline": r"\r\n|\r|\n", "unsafe_char": '[";:,]', "digit": "[0-9]"}

# a utc-offset TZ value, e.g. -05:00 or +01:00
patterns["utc_offset"] = "[+-]{digit!s}{{2}}:{digit!s}{{2}}".format(**patterns)

newline_re = re.compile(patterns["newline"])
param_unsafe_re = re.compile(patterns["unsafe_char"])
utc_offset_re = re.compile(patterns["utc_offset"])
