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

from wordcount.core import Error
from wordcount.driver import Driver, JobConf
from wordcount.util import Options, parseargs


def usage(stream):
    print('Usage:', file=stream)
    print('  wordcount <input>... <output> [<options>]', file=stream)
    print('Options:', file=stream)
    print('  -overwrite yes     replace an existing output directory', file=stream)
    print('  -numthreads <n>    map and reduce on <n> threads', file=stream)
    print('  -combiner yes      combine counts per input file', file=stream)
    print('  -counter <name>    name of the word counter (TOTAL_WORDS)', file=stream)
    print('  -nocounter yes     do not count words', file=stream)


def wordcount(args=None, stderr=None):
    args = sys.argv[1:] if args is None else args
    stderr = stderr or sys.stderr
    paths = []
    while args and not (args[0][:1] == '-' and len(args[0]) > 1):
        paths.append(args[0])
        args = args[1:]
    if len(paths) < 2:
        usage(stderr)
        return 1

    opts = Options([('input', path) for path in paths[:-1]])
    opts.add('output', paths[-1])
    opts += parseargs(args)

    try:
        driver = Driver(JobConf.fromopts(opts, prog='wordcount'))
        driver.run()
    except Error as e:
        print('ERROR: %s' % e, file=stderr)
        return 1

    driver.report(stderr)
    return 0


def execute_and_exit():
    sys.exit(wordcount())


if __name__ == '__main__':
    execute_and_exit()
