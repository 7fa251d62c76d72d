import unittest

from manifest_annotations.annotations.constants import SHAPE_STRING, SHAPE_LIST, SHAPE_INTEGER
from manifest_annotations.annotations.exceptions import AnnotationEncodeError, AnnotationDecodeError
from manifest_annotations.annotations.serializer import ValueSerializer


class ValueSerializerTestCase(unittest.TestCase):
    def setUp(self):
        self.serializer = ValueSerializer()

    def test_encode_string_as_json_literal(self):
        self.assertEqual(self.serializer.encode('my-cluster', SHAPE_STRING), '"my-cluster"')
        self.assertEqual(self.serializer.encode('', SHAPE_STRING), '""')

    def test_encode_list_preserves_order_and_duplicates(self):
        self.assertEqual(self.serializer.encode(['lb-b', 'lb-a', 'lb-b'], SHAPE_LIST), '["lb-b", "lb-a", "lb-b"]')
        self.assertEqual(self.serializer.encode([], SHAPE_LIST), '[]')

    def test_encode_tuple_is_not_a_list(self):
        with self.assertRaisesRegex(AnnotationEncodeError, 'expected a list of strings') as cm:
            self.serializer.encode(('sg-1',), SHAPE_LIST, key='relationships.spinnaker.io/securityGroups')
        self.assertEqual(cm.exception.key, 'relationships.spinnaker.io/securityGroups')

    def test_encode_integer(self):
        self.assertEqual(self.serializer.encode(3, SHAPE_INTEGER), '3')
        self.assertEqual(self.serializer.encode(0, SHAPE_INTEGER), '0')

    def test_encode_keeps_unicode(self):
        self.assertEqual(self.serializer.encode('détail', SHAPE_STRING), '"détail"')

    def test_encode_wrong_shape(self):
        with self.assertRaises(AnnotationEncodeError) as cm:
            self.serializer.encode(['a'], SHAPE_STRING, key='moniker.spinnaker.io/cluster')
        self.assertEqual(cm.exception.key, 'moniker.spinnaker.io/cluster')
        with self.assertRaisesRegex(AnnotationEncodeError, 'item 1'):
            self.serializer.encode(['a', 2], SHAPE_LIST, key='relationships.spinnaker.io/loadBalancers')
        with self.assertRaises(AnnotationEncodeError):
            self.serializer.encode(True, SHAPE_INTEGER)
        with self.assertRaises(AnnotationEncodeError):
            self.serializer.encode('3', SHAPE_INTEGER)

    def test_decode_values(self):
        self.assertEqual(self.serializer.decode('"my-cluster"', SHAPE_STRING), 'my-cluster')
        self.assertEqual(self.serializer.decode('""', SHAPE_STRING), '')
        self.assertEqual(self.serializer.decode('["lb-a", "lb-b"]', SHAPE_LIST), ['lb-a', 'lb-b'])
        self.assertEqual(self.serializer.decode('[]', SHAPE_LIST), [])
        self.assertEqual(self.serializer.decode('12', SHAPE_INTEGER), 12)

    def test_decode_truncated(self):
        with self.assertRaisesRegex(AnnotationDecodeError, 'invalid json') as cm:
            self.serializer.decode('"my-clus', SHAPE_STRING, key='moniker.spinnaker.io/cluster')
        self.assertEqual(cm.exception.key, 'moniker.spinnaker.io/cluster')
        self.assertIn('moniker.spinnaker.io/cluster', str(cm.exception))

    def test_decode_unquoted_string_is_not_canonical(self):
        with self.assertRaises(AnnotationDecodeError):
            self.serializer.decode('my-cluster', SHAPE_STRING, key='moniker.spinnaker.io/cluster')

    def test_decode_wrong_shape(self):
        with self.assertRaisesRegex(AnnotationDecodeError, 'expected a list of strings'):
            self.serializer.decode('"lb-a"', SHAPE_LIST, key='relationships.spinnaker.io/loadBalancers')
        with self.assertRaisesRegex(AnnotationDecodeError, 'expected a string'):
            self.serializer.decode('["lb-a"]', SHAPE_STRING)
        with self.assertRaisesRegex(AnnotationDecodeError, 'expected a string, got null'):
            self.serializer.decode('null', SHAPE_STRING)
        with self.assertRaises(AnnotationDecodeError):
            self.serializer.decode('true', SHAPE_INTEGER)
        with self.assertRaises(AnnotationDecodeError):
            self.serializer.decode('1.5', SHAPE_INTEGER)

    def test_decode_non_string_value(self):
        with self.assertRaisesRegex(AnnotationDecodeError, 'expected a string annotation value'):
            self.serializer.decode(3, SHAPE_INTEGER, key='moniker.spinnaker.io/sequence')

    def test_round_trip_edge_values(self):
        for value, shape in [('', SHAPE_STRING), ('a "quoted" \\ value', SHAPE_STRING), ([], SHAPE_LIST),
                             (['', 'x'], SHAPE_LIST), (-1, SHAPE_INTEGER)]:
            self.assertEqual(self.serializer.decode(self.serializer.encode(value, shape), shape), value)
