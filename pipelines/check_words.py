# Print ranked suggestions for each word given on the command line.
import argparse

from bkspell.config import EngineConfig
from bkspell.data.loader import StaticWordSource, build_word_source, load_word_list
from bkspell.retrieval.engine import CorrectionEngine


def run(args):
    if args.data_file:
        source = StaticWordSource(load_word_list(args.data_file))
    else:
        source = build_word_source(args.source)

    config = EngineConfig(
        dictionary_size=args.dictionary_size,
        max_edit_distance=args.max_edit_distance,
        metric=args.metric,
    )
    engine = CorrectionEngine(config, word_source=source)

    for word in args.words:
        corrections = engine.check(word)
        print(f'Suggestions for "{word}":')
        if corrections and corrections[0]["distance"] > 0:
            for c in corrections:
                print(f"  - {c['word']} (confidence: {c['confidence']:.2f}, dist: {c['distance']})")
        else:
            print("  No suggestions found or word is correct.")

    if args.stats:
        stats = engine.stats()
        print(f"Dictionary size: {stats.dictionary_size} words")
        print(f"Max edit distance: {stats.max_edit_distance}")
        print(f"Cache size: {stats.cache_size} / {stats.cache_capacity}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument("words", nargs="+")
    parser.add_argument("--source", type=str, default="nltk", help="'nltk' or a path to a .txt/.csv word list")
    parser.add_argument("--data-file", type=str, default=None, help="Word list file name under BKSPELL_DATA_DIR")
    parser.add_argument("--dictionary-size", type=int, default=10000)
    parser.add_argument("--max-edit-distance", type=float, default=2)
    parser.add_argument("--metric", type=str, default="sift3", choices=["sift3", "levenshtein"])
    parser.add_argument("--stats", action="store_true", help="Print engine statistics")
    run(parser.parse_args())
