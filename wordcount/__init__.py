"""
The wordcount Python module: a small local map/reduce engine
that counts words.
"""

from wordcount.core import (Error, InputError, OutputError, PreconditionViolation,
    itermap, iterreduce, itermapred, shuffle)
from wordcount.counters import Counter, Counters, TOTAL_WORDS
from wordcount.driver import Driver, JobConf
from wordcount.lib import WordMapper, sumreducer
