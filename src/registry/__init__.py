"""Registry resolvers (sbt directory crawl, Maven metadata)."""
