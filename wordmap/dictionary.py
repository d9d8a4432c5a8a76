
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


def parse_word_list(lines):
    '''
    One word per line, order preserved. Blank lines are skipped;
    duplicates are left for the mapper to reject.
    '''
    words = []
    for line in lines:
        word = line.strip()
        if not word:
            continue
        words.append(word)
    return words


def load_word_list(path):
    path = Path(path).expanduser()
    with path.open(encoding='utf8') as f:
        words = parse_word_list(f)
    logger.info('Loaded %d words from %s', len(words), path)
    return words
