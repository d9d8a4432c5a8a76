
from pathlib import Path
import argparse


def filter_words(lines, skip=0, min_length=1, short_cutoff=None, short_length=None):
    '''
    Turn a frequency-ordered list into a usable dictionary.
    '''
    seen = set()
    for line_n, line in enumerate(lines):
        if line_n < skip:
            continue
        word = line.strip()
        if len(word) < min_length:
            continue
        if short_cutoff is not None and line_n > short_cutoff and len(word) < short_length:
            continue
        if len(word.split()) != 1 or word in seen:
            continue
        seen.add(word)
        yield word


def parse_args(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('source', type=Path)
    parser.add_argument('--skip', type=int, default=30)
    parser.add_argument('--min-length', type=int, default=3)
    parser.add_argument('--short-cutoff', type=int, default=1000)
    parser.add_argument('--short-length', type=int, default=4)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    with args.source.open(encoding='utf8') as f:
        for word in filter_words(
                f,
                skip=args.skip,
                min_length=args.min_length,
                short_cutoff=args.short_cutoff,
                short_length=args.short_length):
            print(word, flush=True)


if __name__ == '__main__':
    main()
