"""
OOTV, Oracle of the Void card scraper and deck analyser
MIT License
"""
