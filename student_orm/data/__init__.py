"""Sample data for student-orm."""

from student_orm.data.sample import SampleGraph, build_sample_graph

__all__ = ["SampleGraph", "build_sample_graph"]
