"""
Word scanner - tach text thanh cac word token.

Quy tac:
- Word = cac chuoi letter noi voi nhau boi MOT joiner ('-' hoac "'")
- Word luon bat dau va ket thuc bang letter
- Digit, punctuation, whitespace la delimiter
- Joiner dung dau, dung cuoi hoac lap lai ("can''t") ket thuc word tai do
- Letter = bat ky ky tu nao co str.isalpha() (Unicode category L*)

Scanner la finite-state machine thuan tuy (khong dung regex), 3 trang thai:

    OUTSIDE       -- letter -->  IN_WORD
    IN_WORD       -- letter -->  IN_WORD
    IN_WORD       -- joiner -->  AFTER_JOINER   (joiner dang cho)
    IN_WORD       -- other  -->  OUTSIDE        (emit word)
    AFTER_JOINER  -- letter -->  IN_WORD        (joiner thuoc word)
    AFTER_JOINER  -- other  -->  OUTSIDE        (emit word, bo joiner)
"""

from typing import Iterator

JOINERS = frozenset("-'")

# Scanner states
OUTSIDE = 0
IN_WORD = 1
AFTER_JOINER = 2


def is_letter(ch: str) -> bool:
    """Ky tu co phai letter (Unicode-aware) khong."""
    return ch.isalpha()


def normalize(word: str) -> str:
    """Chuan hoa word thanh Token (lower-case, Unicode-aware)."""
    return word.lower()


def iter_word_spans(text: str) -> Iterator[tuple[int, int]]:
    """
    Scan text va yield (start, end) cho moi word, theo thu tu trai -> phai.

    end la exclusive va luon tro sau mot letter, nen span khong bao gio rong.
    """
    state = OUTSIDE
    start = 0
    end = 0  # Vi tri sau letter cuoi cung cua word dang scan

    for i, ch in enumerate(text):
        if state == OUTSIDE:
            if is_letter(ch):
                state = IN_WORD
                start = i
                end = i + 1

        elif state == IN_WORD:
            if is_letter(ch):
                end = i + 1
            elif ch in JOINERS:
                state = AFTER_JOINER
            else:
                yield start, end
                state = OUTSIDE

        else:  # AFTER_JOINER
            if is_letter(ch):
                state = IN_WORD
                end = i + 1
            else:
                # Joiner khong theo sau boi letter -> khong thuoc word
                yield start, end
                state = OUTSIDE

    if state != OUTSIDE:
        yield start, end


class TokenStream:
    """
    Lazy, restartable sequence cac Token cua mot text.

    Moi lan iter() se scan lai tu dau - khong giu state giua cac lan duyet.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str):
        self._text = text

    def __iter__(self) -> Iterator[str]:
        text = self._text
        for start, end in iter_word_spans(text):
            yield normalize(text[start:end])

    def __repr__(self) -> str:
        preview = self._text if len(self._text) <= 40 else self._text[:37] + "..."
        return f"TokenStream({preview!r})"


def tokenize(text: str) -> TokenStream:
    """
    Tach text thanh cac Token da normalize.

    Args:
        text: Unicode string bat ky (co the rong)

    Returns:
        TokenStream - lazy va co the duyet lai nhieu lan
    """
    return TokenStream(text)
