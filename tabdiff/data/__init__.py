from tabdiff.data.column_change import *
from tabdiff.data.compare_result import *
from tabdiff.data.compare_rows import *
from tabdiff.data.config import *
from tabdiff.data.diff_options import *
from tabdiff.data.error import *
from tabdiff.data.frozen_dict import *
from tabdiff.data.modified_row import *
from tabdiff.data.parsed_table import *
from tabdiff.data.progress import *
from tabdiff.data.progress_reporter import *
from tabdiff.data.row import *
from tabdiff.data.row_diff import *
from tabdiff.data.row_key import *
from tabdiff.data.schema import *
from tabdiff.data.table_format import *
