from tabdiff.service.compare_files import *
from tabdiff.service.diff import *
from tabdiff.service.list_columns import *
from tabdiff.service.load_table import *
from tabdiff.service.preview_rows import *
