"""Small demos of try/finally control flow and object relationships."""

from concept_demos.guarded import finally_exit_demo, finally_return_demo
from concept_demos.relationships import aggregation_demo, association_demo, composition_demo

__all__ = [
    "aggregation_demo",
    "association_demo",
    "composition_demo",
    "finally_exit_demo",
    "finally_return_demo",
]
