# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys
import inspect
from concurrent.futures import ThreadPoolExecutor
from itertools import chain

from wordcount.core import Error, itercombine, shuffle
from wordcount.counters import Counters, TOTAL_WORDS
from wordcount.lib import WordMapper, sumreducer
from wordcount.textio import TextInput, TextOutput
from wordcount.util import Options, configopts

IDLE = 'idle'
READING = 'reading'
MAPPING = 'mapping'
GROUPING = 'grouping'
REDUCING = 'reducing'
DONE = 'done'
FAILED = 'failed'


class JobConf(object):

    def __init__(self, input, output=None, countername=TOTAL_WORDS,
                 overwrite=False, numthreads=1, combiner=False):
        self.input = input
        self.output = output
        self.countername = countername
        self.overwrite = overwrite
        self.numthreads = numthreads
        self.combiner = combiner

    @property
    def counternames(self):
        return [self.countername] if self.countername else []

    @classmethod
    def fromopts(cls, opts, prog=None):
        """Build a configuration from options, falling back on config files."""
        opts = Options(opts)
        fileopts = Options(configopts('wordcount', prog))
        for key, _ in fileopts:
            if key not in opts:
                opts.update(key, fileopts[key])
        if not opts['input']:
            raise Error('no input path specified')
        if not opts['output']:
            raise Error('no output path specified')
        try:
            numthreads = int(opts.first('numthreads', 1))
        except ValueError:
            raise Error('invalid number of threads: %s' % opts.first('numthreads'))
        if numthreads < 1:
            raise Error('invalid number of threads: %s' % numthreads)
        countername = opts.first('counter', TOTAL_WORDS)
        if 'yes' in opts['nocounter']:
            countername = None
        return cls(opts['input'],
                   opts['output'][-1],
                   countername=countername,
                   overwrite='yes' in opts['overwrite'],
                   numthreads=numthreads,
                   combiner='yes' in opts['combiner'])

    def __repr__(self):
        return 'JobConf(input=%r, output=%r)' % (self.input, self.output)


class Driver(object):
    """
    Runs one word count job: read, map, group, reduce, write.

    A run either completes, returning all aggregates and leaving
    the counters readable, or raises and leaves nothing behind.
    """

    def __init__(self, conf, mapper=None, reducer=sumreducer, combiner=None):
        self.conf = conf
        self.mapper = mapper or WordMapper
        self.reducer = reducer
        if combiner is None and conf.combiner:
            combiner = reducer
        self.combiner = combiner
        self.state = IDLE
        self._counters = None

    @property
    def counters(self):
        return self._done_counters().snapshot()

    def getcounter(self, name):
        counters = self._done_counters()
        if name not in counters:
            raise KeyError(name)
        return counters[name].value

    def report(self, stream=None):
        self._done_counters().report(stream)

    def _done_counters(self):
        if self.state != DONE:
            raise Error('counters are only available after a completed run '
                        '(state is %s)' % self.state)
        return self._counters

    def _input(self):
        input = self.conf.input
        if isinstance(input, str) or (isinstance(input, (list, tuple)) and
                                      all(isinstance(p, str) for p in input)):
            return TextInput(input)
        return input

    def _output(self):
        output = self.conf.output
        if isinstance(output, str):
            return TextOutput(output, overwrite=self.conf.overwrite)
        return output

    def _sources(self, input):
        if hasattr(input, 'sources'):
            return list(input.sources())
        return [list(input)]

    def _instantiate(self, counters):
        if inspect.isclass(self.mapper):
            if self.conf.countername:
                return self.mapper(counters, self.conf.countername)
            return self.mapper()
        return self.mapper

    def _parallel(self, func, items, pool):
        if pool is None:
            return [func(item) for item in items]
        return list(pool.map(func, items))

    def run(self):
        if self.state not in (IDLE, DONE, FAILED):
            raise Error('driver is already running (state is %s)' % self.state)
        self._counters = counters = Counters(self.conf.counternames)
        sink = self._output()
        pool = None
        if self.conf.numthreads > 1:
            pool = ThreadPoolExecutor(max_workers=self.conf.numthreads)
        try:
            if sink is not None:
                sink.open()

            self.state = READING
            sources = self._sources(self._input())

            self.state = MAPPING
            mapper = self._instantiate(counters)
            mapfunc = lambda record: list(mapper(*record))
            pairs = []
            for records in sources:
                outputs = chain.from_iterable(self._parallel(mapfunc, records, pool))
                if self.combiner:
                    outputs = itercombine(outputs, self.combiner)
                pairs.extend(outputs)

            self.state = GROUPING
            groups = shuffle(pairs)
            del pairs

            self.state = REDUCING
            reducer = self.reducer
            redfunc = lambda group: list(reducer(*group))
            results = list(chain.from_iterable(self._parallel(redfunc, groups, pool)))

            if sink is not None:
                for key, value in results:
                    sink.write(key, value)
                sink.commit()
        except BaseException:
            self.state = FAILED
            if sink is not None:
                sink.abort()
            raise
        finally:
            if pool is not None:
                pool.shutdown()

        self.state = DONE
        print('INFO: reduced %d groups into %d outputs' % (len(groups), len(results)),
              file=sys.stderr)
        return results
