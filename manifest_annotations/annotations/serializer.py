import json

from .constants import SHAPE_STRING, SHAPE_LIST, SHAPE_INTEGER
from .exceptions import AnnotationEncodeError, AnnotationDecodeError


class ValueSerializer(object):
    """Converts annotation field values to and from their canonical JSON text

    Strings are stored as JSON string literals so an empty string is distinguishable from a missing
    annotation, lists of strings as JSON arrays and integers as JSON numbers.
    The serializer is stateless and may be shared between threads.
    """

    def encode(self, value, shape, key=None):
        assert value is not None, f'null values are not encoded: {key}'
        problem = _get_shape_problem(value, shape)
        if problem:
            raise AnnotationEncodeError(key, problem)
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise AnnotationEncodeError(key, str(e)) from e

    def decode(self, value, shape, key=None):
        if not isinstance(value, str):
            raise AnnotationDecodeError(key, f'expected a string annotation value, got {type(value).__name__}')
        try:
            decoded = json.loads(value)
        except ValueError as e:
            raise AnnotationDecodeError(key, f'invalid json: {e}') from e
        problem = _get_shape_problem(decoded, shape)
        if problem:
            raise AnnotationDecodeError(key, problem)
        return decoded


def _get_shape_problem(value, shape):
    if shape == SHAPE_STRING:
        if not isinstance(value, str):
            return f'expected a string, got {_describe(value)}'
    elif shape == SHAPE_LIST:
        if not isinstance(value, list):
            return f'expected a list of strings, got {_describe(value)}'
        for i, item in enumerate(value):
            if not isinstance(item, str):
                return f'expected a list of strings, item {i} is {_describe(item)}'
    elif shape == SHAPE_INTEGER:
        # bool is a subclass of int but true/false is not a valid sequence
        if isinstance(value, bool) or not isinstance(value, int):
            return f'expected an integer, got {_describe(value)}'
    else:
        raise ValueError(f'unknown value shape: {shape}')
    return None


def _describe(value):
    if value is None:
        return 'null'
    elif isinstance(value, list):
        return 'a list'
    elif isinstance(value, dict):
        return 'an object'
    else:
        return f'{type(value).__name__} ({value!r})'
