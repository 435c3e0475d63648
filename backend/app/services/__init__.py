"""Services Layer: PostService and the post id generator (the imperative shell around core/)."""
