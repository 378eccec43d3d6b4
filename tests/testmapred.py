import unittest
from wordcount import core
from wordcount.lib import WordMapper, sumreducer


class TestMapRed(unittest.TestCase):

    def testwordcount(self):
        def mapper(key, value):
            for word in value.split(): yield word, 1
        def reducer(key, values):
            yield key, sum(values)
        input = enumerate(['one two', 'two one two'])
        output = dict(core.itermapred(input, mapper, reducer))
        self.assertEqual(output['one'], 2)
        self.assertEqual(output['two'], 3)

    def testitermap(self):
        input = [(0, 'cat cat'), (8, 'dog')]
        output = list(core.itermap(input, WordMapper()))
        self.assertEqual(output, [('cat', 1), ('cat', 1), ('dog', 1)])

    def testshuffle(self):
        pairs = [('cat', 1), ('dog', 1), ('cat', 1)]
        self.assertEqual(core.shuffle(pairs), [('cat', [1, 1]), ('dog', [1])])

    def testshufflekeeporder(self):
        pairs = [('b', 3), ('a', 1), ('b', 1), ('a', 2), ('b', 2)]
        self.assertEqual(core.shuffle(pairs), [('a', [1, 2]), ('b', [3, 1, 2])])

    def testshufflesortsbycodepoint(self):
        pairs = [(k, 1) for k in ['two', 'one', 'Zebra', 'three', 'six', 'four',
                                  'five', 'one', 'apple']]
        keys = [key for key, _ in core.shuffle(pairs)]
        self.assertEqual(keys, ['Zebra', 'apple', 'five', 'four', 'one', 'six',
                                'three', 'two'])

    def testshufflegenerator(self):
        pairs = ((word, 1) for word in 'x y x'.split())
        self.assertEqual(core.shuffle(pairs), [('x', [1, 1]), ('y', [1])])

    def testshuffleempty(self):
        self.assertEqual(core.shuffle([]), [])

    def testiterreduce(self):
        groups = [('cat', [1, 1]), ('dog', [1])]
        self.assertEqual(list(core.iterreduce(groups, sumreducer)),
                         [('cat', 2), ('dog', 1)])

    def testitercombine(self):
        pairs = [('cat', 1), ('dog', 1), ('cat', 1)]
        self.assertEqual(list(core.itercombine(pairs, sumreducer)),
                         [('cat', 2), ('dog', 1)])

    def testcompleteness(self):
        lines = ['a b c', 'b c d', 'e a']
        output = list(core.itermapred(enumerate(lines), WordMapper(), sumreducer))
        keys = [key for key, _ in output]
        self.assertEqual(keys, sorted(set(' '.join(lines).split())))
        self.assertEqual(sum(total for _, total in output), 8)


if __name__ == "__main__":
    unittest.main()
