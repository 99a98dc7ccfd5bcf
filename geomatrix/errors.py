#!/usr/bin/env python3
# pylint: disable=unused-import

from nonstdlib import MagicFormatter, fmt
from nonstdlib import log, debug, info, warning, error, critical

## Degenerate geometry vs. API misuse
# ===================================
# The relations never raise because of degenerate geometry.  A zero-length
# segment, a zero-radius circle, or a rect with a negative size just produces a
# degenerate result or a NaN, and NaN compares false wherever it ends up in a
# predicate.
#
# Use ApiUsageError for mistakes the caller can make through the public API:
# passing something that isn't a shape, writing a shape in malformed notation,
# or failing one of the checks in geomatrix.validation.
#
# Use assertions for things that should be impossible without reaching into
# private attributes, like a relation table that resolved to the wrong arity.

## Anatomy of an error message
# ============================
# 1. One line that succinctly states what the problem is.  Phrase it so that
#    it won't mislead the user if it's triggered in an unexpected way.
#
# 2. In a separate paragraph, a few sentences that explain the most likely
#    cause of the problem and suggest a way to solve it.


def format_error_message(prefix, magic_fmt_level, message, *args, **kwargs):
    import re, textwrap

    if not message:
        return ''

    # Lowercase the first letter of the error message, to enforce the
    # recommended style.  This won't have any effect if the message starts with
    # a template argument (e.g. {}), which is intentional because template
    # arguments are often identifier names.

    message = textwrap.dedent(message)
    message = message[0].lower() + message[1:]
    message = message | MagicFormatter(args, kwargs, magic_fmt_level)
    paragraphs = [x.strip() for x in re.split(r'\n\s*\n', message)]

    # Make sure the summary doesn't overflow its allocated space even after
    # python adds the 'geomatrix.errors.ApiUsageError: ' prefix.

    summary = textwrap.fill(
            paragraphs.pop(0).replace('\n', ' '),
            width=ApiUsageError.message_width,
            initial_indent=' ' * len(prefix),
    ).strip()

    # Wrap each details paragraph, preserving its indentation.

    details = ''

    for paragraph in paragraphs:
        lines = paragraph.split('\n')
        indent_pattern = re.compile(r'\s*')
        initial_indent = indent_pattern.match(lines[0]).group()
        subsequent_indent = indent_pattern.match(lines[-1]).group()

        details += '\n\n' + textwrap.fill(
                paragraph.replace('\n', ' '),
                width=ApiUsageError.message_width,
                initial_indent=initial_indent,
                subsequent_indent=subsequent_indent,
        )

    return summary + details


class ApiUsageError(Exception):
    """
    Tell the user when they're misusing the geometry API and suggest how they
    should be using it instead.
    """

    message_width = 79

    def __init__(self, message, *args, **kwargs):
        prefix = '{cls.__module__}.{cls.__name__}: '.format(cls=self.__class__)
        message = format_error_message(prefix, 3, message, *args, **kwargs)
        super().__init__(message)


class NullVectorError(ApiUsageError):
    """
    Raised by the validation layer when a direction is needed from a vector
    that has no length.
    """
    pass



def debug_only(function):
    if __debug__:
        return function
    else:
        return lambda *args, **kwargs: None

