from tabdiff.adapter import config, fs, parse, render
from tabdiff.adapter.progress_queue import *
