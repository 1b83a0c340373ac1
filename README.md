# cfgdraw

Helpers for laying out and drawing control-flow graphs of bytecode programs.
A graph is given as a collection of blocks, each identified by the program
counter where it starts, and a list of `(from, to)` edges between them.

## What it offers

- `cfgdraw.text_drawing.draw_graph_to_str(blocks, edges)` takes a mapping from
  each block's first program counter to its lines of code and draws the blocks
  as framed boxes, one below the other, in ascending order. Jumps between them
  are drawn with box-drawing characters: forward jumps run down the right-hand
  side and backward jumps run up the left-hand side. Lines of 35 characters or
  more are cut and end in `...`. The same drawing is available step by step
  through `RectangleSet`, `Links` and `rectangle_to_grid` in that module, and
  `cfgdraw.text_grid.CharGrid` is the growable character grid underneath.
- `cfgdraw.gml.blocks_to_gml(pc_starts, edges, tags=None)` writes the graph in
  GML, so that graph editors can open it. Nodes are listed by ascending program
  counter, and `tags` may attach a tag to some of them.
- `cfgdraw.block_layout.compute_blocks_organisation(adjacency_list)` takes a
  graph of vertices `0 .. n-1`, cuts its cycles (on a copy), sorts it
  topologically and places every vertex on a `cfgdraw.layout_grid.LayoutGrid`
  of rows and columns. Vertices are moved up while nothing in the row above
  points to them, then pulled towards the average column of their neighbours.
  `cfgdraw.block_layout.topological_order` raises `ValueError` on a cyclic
  graph.
- `cfgdraw.drawing.Drawing` draws lines, boxes and text on a Pillow image and
  saves it as PNG. It uses the DejaVu Serif font when it can be found and
  Pillow's default font otherwise. `cfgdraw.drawing.new_random_color` hands out
  the colours of a fixed palette in turn. `Coord`, `Dims` and `Color` live in
  `cfgdraw.colors`, and the layout and colour settings in `cfgdraw.specs`.
- Smaller tools: `cfgdraw.stack.Stack`, `cfgdraw.cut_cycles.remove_cycles`,
  `cfgdraw.graph_tools.node_dfs` and `pack_by_block`, and the helpers in
  `cfgdraw.utils` (`hex_to_int`, `int_to_hex`, `iter_int`, `dedup_all`,
  `rename_keys`, `find_files` and others).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from cfgdraw.text_drawing import draw_graph_to_str
from cfgdraw.gml import blocks_to_gml

blocks = {
    0: ["PUSH1 0x80", "JUMPI"],
    10: ["JUMPDEST", "STOP"],
    20: ["JUMPDEST", "JUMP"],
}
edges = [(0, 10), (0, 20), (20, 0)]

print(draw_graph_to_str(blocks, edges))
print(blocks_to_gml(blocks.keys(), edges, {0: "entry"}))
```

To lay out a graph given as an adjacency list of vertex indexes:

```python
from cfgdraw.block_layout import compute_blocks_organisation

grid = compute_blocks_organisation([[1, 2], [2], []])
for y in range(grid.height):
    print(y, grid.get_sorted_indexes_at_y(y))
```

## What it does not do

- It does not read or disassemble bytecode, and does not build a control-flow
  graph: the blocks, their lines of code and the edges must be supplied by the
  caller.
- There is no single call that turns a graph into a PNG. `compute_blocks_organisation`
  gives the positions and `Drawing` draws the shapes; putting the two together
  is left to the caller.
- There is no command-line program; everything is used from Python.