"""Pagination of posts into index pages: all posts, or grouped by tags, categories or dates."""