
class WordMapError(ValueError):
    '''
    Base for everything the word mapper raises.
    '''


class InvalidInputError(WordMapError):
    pass


class EmptyInputError(InvalidInputError):
    pass


class UnknownWordError(WordMapError):
    def __init__(self, word):
        super().__init__('{!r} is not a valid number word'.format(word))
        self.word = word


class WordOverflowError(WordMapError, OverflowError):
    def __init__(self, words, domain):
        super().__init__(
            '{!r} cannot be represented in the {} domain'.format(
                words, domain.name))
        self.words = words
        self.domain = domain


class InvalidDictionaryError(WordMapError):
    pass


class DuplicateWordError(InvalidDictionaryError):
    def __init__(self, word, first, second):
        super().__init__(
            '{!r} appears at both position {} and {}'.format(
                word, first, second))
        self.word = word
        self.positions = (first, second)
