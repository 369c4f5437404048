"""ideaforge: comment-driven content idea generation backend."""
