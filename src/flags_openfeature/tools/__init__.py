"""Developer tooling shipped with flags-openfeature."""
