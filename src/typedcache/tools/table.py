# This file is part of the typedcache project.
# Copyright typedcache developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

from itertools import zip_longest
from shutil import get_terminal_size
from textwrap import wrap

import numpy as np


def _wrap_entry(entry, width):
    # break dotted default paths on '.' rather than on '-'
    entry = entry.replace('-', '\0').replace('.', '-')
    lines = wrap(entry, width, subsequent_indent='  ', break_on_hyphens=True) or ['']
    return [l.replace('-', '.').replace('\0', '-') for l in lines]


def format_table(rows, width='AUTO', title=None):
    """Format `rows` as a plain text table.

    The first row is treated as header and underlined. If the table does not
    fit into `width` characters, the widest column is wrapped.

    Parameters
    ----------
    rows
        Sequence of rows, each a sequence of cells. Cells are converted with `str`.
    width
        Maximum table width. If `'AUTO'`, the terminal width is used.
    title
        Optional title centered above the table.
    """
    rows = [[str(c) for c in r] for r in rows]
    if width == 'AUTO':
        width = get_terminal_size()[0] - 1
    column_widths = [max(map(len, c)) for c in zip(*rows, strict=True)]
    padding = 2 * (len(column_widths) - 1)
    if sum(column_widths) + padding > width:
        widest = int(np.argmax(column_widths))
        others = column_widths[:widest] + column_widths[widest + 1:]
        column_widths[widest] = max(max(others, default=0), width - padding - sum(others))
    total_width = sum(column_widths) + padding

    lines = []
    for row in rows:
        cells = [_wrap_entry(c, cw) for c, cw in zip(row, column_widths, strict=True)]
        lines.extend(zip_longest(*cells, fillvalue=''))
    lines.insert(1, ['-' * cw for cw in column_widths])

    header = ''
    if title is not None:
        underline = '=' * len(title)
        header = f'{title:^{total_width}}\n{underline:^{total_width}}\n\n'

    return header + '\n'.join('  '.join(f'{c:<{cw}}' for c, cw in zip(line, column_widths, strict=True))
                              for line in lines)
