# cyclesearch

`cyclesearch` simulates a message-passing protocol for finding cycles in a
directed graph. Each node knows only its own outgoing neighbours. The nodes
exchange Diffie–Hellman style values in a small prime-order subgroup, and a
node that starts a search finds the bounded-length cycles that pass through it.

## How the protocol works

A search started by a node uses four kinds of message (`MessageType`):

- `FORWARD` messages carry a blinded `g^x` value outward. Each hop lowers the
  time-to-live, and a message stops being relayed once it reaches 0. Each relay
  records a `Route` so that it can pass replies back.
- `BACKWARD` messages send answers back along the recorded routes to the
  initiator. If the key that the initiator derives matches one it already
  holds, the initiator has closed a cycle.
- `PUBLISH` messages carry the cycle's path around the cycle. Each node adds
  its own id to the path.
- `BROADCAST` messages announce a completed cycle path to every node. Each node
  adds the path's edges to its known topology.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Running the experiment

```
cyclesearch
```

The command does the following:

1. It generates group parameters with `group_parameters(q_size, r_size)`.
2. For every graph size from `--n-lower` to `--n-upper` and every density
   `m` from `--d-lower` to `--d-upper`, it builds a scale-free
   (Barabási–Albert style) graph with `generate_scale_free_graph(m, m, size)`.
3. On each graph, it runs the search from every node, once for each depth
   from `--l-lower` to `--l-upper`.
4. It prints one statistics line per run.
5. It appends the same figures as CSV rows to a log file in the `--output`
   directory. The file is named `-<start time in ms>group [p=…,q=…,r=…,h=…,g=…].log`.

The options and their defaults:

| option         | default  | meaning                        |
|----------------|----------|--------------------------------|
| `--l-lower`    | 2        | minimum search depth           |
| `--l-upper`    | 4        | maximum search depth           |
| `--n-lower`    | 50       | minimum graph size             |
| `--n-upper`    | 50       | maximum graph size             |
| `--d-lower`    | 3        | minimum `m` (density)          |
| `--d-upper`    | 9        | maximum `m` (density)          |
| `--iterations` | 1        | how often the sweep is repeated |
| `--q-size`     | 20       | bits of the subgroup order `q` |
| `--r-size`     | 40       | size parameter for `r`         |
| `--output`     | `output` | directory for the log file     |

The CSV has these columns:

```
n,m,d_avg,l,n_cyc,c_edge,n_msg,n_for,n_echo,n_pub,n_brd,t
```

## Using the library

```python
from cyclesearch.util import group_parameters, generate_scale_free_graph
from cyclesearch.simulation import generate_nodes, run

group = group_parameters(20, 40)
m, d_avg, graph = generate_scale_free_graph(3, 3, 20)
nodes = generate_nodes(graph, group)
result = run(len(nodes), nodes, 3, m, d_avg)
print(result.cycles, result.messages)
```

`run` prints its statistics line. It also returns a `RunResult` with these
fields: `cycles`, `cycle_edges`, `messages`, `forward`, `backward`, `publish`,
`broadcast` and `elapsed_ms`.

The modules divide the work as follows:

- `cyclesearch.util` has these parts:
  - the `Group` parameters;
  - modular arithmetic: `mul_mod` and `pow_mod`;
  - random helpers: `random_in_range`, `random_of_size` and `random_in_group`;
  - prime generation: `low_level_prime`, `trial_composite`,
    `miller_rabin_test`, `big_prime` and `group_parameters`;
  - graph helpers: `generate_graph`, `generate_scale_free_graph`,
    `average_degree` and `format_graph`.
- `cyclesearch.message` defines `MessageType` and `Message`. A `Message` is
  built with `Message.forward`, `Message.backward`, `Message.publish` or
  `Message.broadcast`. It offers `path_key()`, `describe()` and `type_name()`.
- `cyclesearch.node` defines `Node`, `Route` and `Edge`. A `Node` handles each
  message kind through `initiate`, `forward`, `backward`, `publish` and
  `broadcast`, and provides the `topology_string()`, `keys_string()` and
  `neighbour_size()` helpers.
- `cyclesearch.simulation` provides the following:
  - `send`, which delivers a message to its target node;
  - `generate_nodes`;
  - `run`;
  - `write_file`, which appends to the log;
  - `read_file`, which loads a graph from a file of `source,target` lines.
    Sources must appear in ascending order. A node keeps at most
    `max_neighbours` targets, and edges that touch a node above `max_size`
    are skipped.

## What it does not do

The whole protocol runs inside a single process. Messages are delivered from an
in-memory queue, so there is no networking and no real distributed deployment.
The group is small and is generated with probabilistic tests, so the package
gives no cryptographic security. Its only output is the printed statistics and
the CSV log. The `cyclesearch` command always uses generated graphs; loading a
graph with `read_file` is available only from Python.