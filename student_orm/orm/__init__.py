"""
This orm module contains the ORM (Object-Relational Mapping) models of the student graph
used in student-orm.
It contains the mapped entities, repositories, Unit of Work and service layers,
and database connection utilities.
"""
