"""Developer tooling: opt-in timing instrumentation (``SIGGEN_DEBUG``)."""
