"""
Sempoa Trainer - abacus practice with a mastery-gated curriculum.

Packages:
- core: digit-pair classification, bead-value codec, shared enums
- learning: curriculum graph, question generator, progression engine
- db: persistence of learner progress
- cli: terminal front-end
"""

__version__ = "1.0.0"
