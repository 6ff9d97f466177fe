"""
general.
=======

Shared general-purpose modules used by both scoring paths:
token normalization & keywords, fuzzy matching, vocab, config/log utils.
"""
