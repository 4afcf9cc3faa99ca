# santaworkshop

An interactive console workshop for Santa's elves. You enter children
and their letters to Santa, and the workshop then:

- picks each child's gifts from the wish list, keeping within a budget
  ($100 for a good child, $10 for a bad one) and checking what is in
  stock (stock is decided by a coin toss for every check);
- gives a default gift when the most expensive wish is over budget or
  nothing could be chosen;
- turns the money left over into candy, and adds a lump of coal
  ($0.5) for bad children;
- counts the pink (girl) and blue (boy) gift packs;
- plans Santa's route through the Botswana cities in two ways: a minimum
  spanning tree over all the cities (Kruskal) and a greedy shortest-path
  route over only the cities the children live in (Dijkstra).

## Installing

```
pip install .
```

## Running

```
santaworkshop
```

The menu offers these options:

```
1. Insert new child and letter
2. Check Letter Database
3. Creates the final Santa's report based on children you inserted
4. Read me
5. Delete letter
0. Exit program
```

Input is read as whitespace-separated words, so names contain no
spaces. The program ends on option 0 or at the end of input.

Children and letters are kept in two plain text files in the current
directory, `ChildrenDB.txt` and `LetterDB.txt`. Each line holds one
record with space-separated fields. Deleting a letter also deletes the
child stored under the same number.

## Using it as a library

The parts work on their own as well:

```python
from santaworkshop.models import Gift, Wishlist
from santaworkshop.store import store_list, default_gift
from santaworkshop.roads import kruskal_mst, default_edges
from santaworkshop.dijkstra import build_subgraph, greedy_route

gifts = store_list()                # the workshop's catalogue
fallback = default_gift(100)        # the "100 Default Gift"
tree = kruskal_mst(5, default_edges())
graph = build_subgraph([0, 2, 4])   # roads between three chosen cities
route, distance = greedy_route(graph, 0)
```

- `santaworkshop.models` holds the data classes `Gift`, `Children`,
  `Wishlist`, `Letter` and `City`.
- `santaworkshop.store` holds the gift catalogue, stock checks, default
  gifts and the destination cities.
- `santaworkshop.databases` holds `ChildrenDatabase` and
  `LetterDatabase` for the text-file storage; both take the file path
  as an argument.
- `santaworkshop.elf.ElfProcess` turns letters into final gift lists,
  candy counts and costs. It accepts an `in_stock` callable or a
  `random.Random` to make stock checks predictable.
- `santaworkshop.roads` has `kruskal_mst`, `DisjointSet` and
  `mst_report`; `santaworkshop.dijkstra` has `shortest_distance`,
  `greedy_route` and `route_report`.
- `santaworkshop.ui` holds the console front end (`Console`,
  `LetterUI`, `ElfUI`, `MainUI`) and `main`.

## Tests

```
pip install .[test]
pytest
```