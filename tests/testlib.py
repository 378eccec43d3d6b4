import unittest

from wordcount.core import PreconditionViolation
from wordcount.counters import Counters, TOTAL_WORDS
from wordcount.lib import WordMapper, sumreducer


class TestWordMapper(unittest.TestCase):

    def setUp(self):
        self.counters = Counters([TOTAL_WORDS])
        self.mapper = WordMapper(self.counters)

    def testsingleword(self):
        self.assertEqual(list(self.mapper(1, 'foo')), [('foo', 1)])
        self.assertEqual(self.counters[TOTAL_WORDS].value, 1)

    def testmultiplewords(self):
        output = list(self.mapper(1, 'one two three four'))
        self.assertEqual(output, [('one', 1), ('two', 1), ('three', 1), ('four', 1)])
        self.assertEqual(self.counters[TOTAL_WORDS].value, 4)

    def testrepeatedwords(self):
        output = list(self.mapper(1, 'cat cat dog'))
        self.assertEqual(output, [('cat', 1), ('cat', 1), ('dog', 1)])
        self.assertEqual(self.counters[TOTAL_WORDS].value, 3)

    def testcountsalongsideemission(self):
        outputs = self.mapper(1, 'a b c')
        next(outputs)
        self.assertEqual(self.counters[TOTAL_WORDS].value, 1)
        next(outputs)
        self.assertEqual(self.counters[TOTAL_WORDS].value, 2)

    def testwhitespace(self):
        output = list(self.mapper(0, '  Hello,\tworld!\n hello  '))
        self.assertEqual(output, [('Hello,', 1), ('world!', 1), ('hello', 1)])

    def testjavadelimiters(self):
        output = list(self.mapper(0, 'a\xa0b c\x0bd e\u2003f\rg'))
        self.assertEqual(output, [('a\xa0b', 1), ('c\x0bd', 1), ('e\u2003f', 1), ('g', 1)])
        self.assertEqual(self.counters[TOTAL_WORDS].value, 4)

    def testempty(self):
        self.assertEqual(list(self.mapper(0, '')), [])
        self.assertEqual(list(self.mapper(1, ' \t ')), [])
        self.assertEqual(self.counters[TOTAL_WORDS].value, 0)

    def testdeterministic(self):
        line = 'the quick brown fox jumps over the lazy dog'
        self.assertEqual(list(self.mapper(0, line)), list(self.mapper(0, line)))
        self.assertEqual(self.counters[TOTAL_WORDS].value, 18)

    def testwithoutcounter(self):
        mapper = WordMapper()
        self.assertEqual(list(mapper(0, 'cat dog')), [('cat', 1), ('dog', 1)])
        self.assertTrue(mapper.counter is None)

    def testcustomcountername(self):
        mapper = WordMapper(self.counters, 'WORDS')
        list(mapper(0, 'a b'))
        self.assertEqual(self.counters['WORDS'].value, 2)
        self.assertEqual(self.counters[TOTAL_WORDS].value, 0)

    def testnorecord(self):
        self.assertRaises(PreconditionViolation, self.mapper, 0, None)


class TestSumReducer(unittest.TestCase):

    def testsum(self):
        self.assertEqual(list(sumreducer('foo', [1, 4, 7])), [('foo', 12)])

    def testsinglevalue(self):
        self.assertEqual(list(sumreducer('cat', [5])), [('cat', 5)])

    def testiterator(self):
        self.assertEqual(list(sumreducer('cat', iter([1, 1]))), [('cat', 2)])

    def testidempotent(self):
        group = ('dog', [2, 3])
        self.assertEqual(list(sumreducer(*group)), list(sumreducer(*group)))

    def testnovalues(self):
        self.assertRaises(PreconditionViolation, list, sumreducer('foo', []))


if __name__ == "__main__":
    unittest.main()
