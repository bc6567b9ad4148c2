"""
gleamhatch.keywords - Static Lookup Tables for Name Validation
==============================================================

Project names become Erlang module and application atoms as well as Gleam
module names, so a few words can never be used:

- Erlang reserved words (``case``, ``receive``, ...) cannot be bare atoms.
- Erlang/OTP standard library module names would clash with the modules the
  runtime already loads.
- Gleam keywords cannot be used as a Gleam module name.

These tables are plain frozensets. The validator never imports them directly;
it receives them through a ``NameRegistry`` so other tables can be swapped in.
"""

from __future__ import annotations


# =============================================================================
# Erlang
# =============================================================================

ERLANG_RESERVED_WORDS: frozenset[str] = frozenset({
    "after", "and", "andalso", "band", "begin", "bnot", "bor", "bsl", "bsr",
    "bxor", "case", "catch", "cond", "div", "end", "fun", "if", "let",
    "maybe", "not", "of", "or", "orelse", "receive", "rem", "try", "when",
    "xor",
})

# Modules shipped in the kernel and stdlib OTP applications.
ERLANG_STANDARD_LIBRARY_MODULES: frozenset[str] = frozenset({
    # kernel
    "application", "auth", "code", "disk_log", "erl_boot_server",
    "erl_ddll", "erl_epmd", "erl_prim_loader", "erlang", "error_handler",
    "error_logger", "file", "gen_sctp", "gen_tcp", "gen_udp", "global",
    "global_group", "heart", "inet", "inet_res", "init", "kernel", "logger",
    "net_adm", "net_kernel", "os", "pg", "rpc", "seq_trace", "socket",
    "wrap_log_reader", "zlib",
    # stdlib
    "array", "base64", "beam_lib", "binary", "c", "calendar",
    "dets", "dict", "digraph", "digraph_utils", "epp", "erl_anno",
    "erl_eval", "erl_expand_records", "erl_id_trans", "erl_internal",
    "erl_lint", "erl_parse", "erl_pp", "erl_scan", "erl_tar", "ets",
    "file_sorter", "filelib", "filename", "gb_sets", "gb_trees", "gen_event",
    "gen_fsm", "gen_server", "gen_statem", "io", "io_lib", "lists",
    "log_mf_h", "maps", "math", "ms_transform", "orddict", "ordsets", "pool",
    "proc_lib", "proplists", "qlc", "queue", "rand", "random", "re", "sets",
    "shell", "shell_default", "slave", "sofs", "stdlib", "string",
    "supervisor", "supervisor_bridge", "sys", "timer", "unicode",
    "uri_string", "win32reg", "zip",
})


# =============================================================================
# Gleam
# =============================================================================

GLEAM_KEYWORDS: frozenset[str] = frozenset({
    "as", "assert", "case", "const", "external", "fn", "if", "import",
    "let", "opaque", "pub", "todo", "try", "tuple", "type",
})
