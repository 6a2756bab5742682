"""
GenAI Atlas - browse, filter and score real-world GenAI case studies

A small domain-driven toolkit over a static dataset of documented GenAI
deployments ("use cases") and the intervention frameworks they belong to.

Architecture:
- Catalog Context: Dataset records, bundled data file, loading and lookup
- Targeting Context: Framework matching, difficulty derivation, filtering, fit scoring
- State Context: Saved opportunities, recent searches and preferences
"""

__version__ = "0.1.0"
