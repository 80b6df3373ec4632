"""Boggle word-search engine: board generation, path search and scoring."""
