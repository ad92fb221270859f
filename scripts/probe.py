from collections import Counter
import os, sys

# Ensure project root is on sys.path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from auraball.autoplay import play_session


def run(seed: int, accuracy: int, click_every=20):
    """Play one scripted game and return how it ended and the final score."""
    ending, score = None, None
    for event, data in play_session(seed=seed, accuracy=accuracy, click_every=click_every):
        if event in ("win", "timeout"):
            ending, score = event, data["score"]
    return ending, score


def probe(label, **kwargs):
    """Try many seeds and print simple distribution info.

    This is a rough way to eyeball how forgiving the miss penalty is.
    """
    c = Counter()
    wins = 0
    n = 200
    total = 0
    for s in range(n):
        ending, score = run(s, **kwargs)
        if ending == "win":
            wins += 1
        total += score
        c[score] += 1
    print(f"\n[{label}] games: {n}  win rate: {round(wins/n,3)}  mean score: {round(total/n,1)}")
    for k,v in c.most_common(5):
        print(v, k)


def main():
    """Run a few probes with different bot accuracies."""
    probe('sharp acc=95', accuracy=95)
    probe('average acc=75', accuracy=75)
    probe('sloppy acc=40', accuracy=40)


if __name__ == '__main__':
    main()
