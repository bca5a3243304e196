import random
from pyinstrument import Profiler
from sortedlinked import ArrayStorage, LinkedStorage, SortedLinkedList
from sortedlinked.engine.insertion import is_ordered

def fill(storage, values):
    sl = SortedLinkedList(storage=storage)
    for v in values:
        sl.add(v)
    return sl

def insert_in_place(sl, rng, n):
    # picks a slot, then inserts a value that fits there
    for _ in range(n):
        i = rng.randrange(len(sl) + 1)
        value = sl[i - 1] if i > 0 else sl[0]
        sl.insert(i, value)

def benchmark_large():
    rng = random.Random(42)
    values = [rng.randint(0, 1_000_000) for _ in range(3_000)]

    profiler = Profiler()
    profiler.start()

    for storage in (LinkedStorage, ArrayStorage):
        print(f"Filling {storage.__name__} with {len(values)} values...")
        sl = fill(storage, values)
        insert_in_place(sl, rng, 500)
        sl.insert_all(len(sl), [sl[-1]] * 100)
        assert is_ordered(sl._storage, sl.cmp)
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("sortedlinked_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large()
