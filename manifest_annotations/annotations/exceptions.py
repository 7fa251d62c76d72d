class AnnotationError(ValueError):
    pass


class MissingDescriptorError(AnnotationError):
    pass


class AnnotationEncodeError(AnnotationError):

    def __init__(self, key, reason):
        self.key = key
        self.reason = reason
        super().__init__(f"Illegal annotation value for '{key}': {reason}")


class AnnotationDecodeError(AnnotationError):

    def __init__(self, key, reason):
        self.key = key
        self.reason = reason
        super().__init__(f"Illegally annotated resource for '{key}': {reason}")
