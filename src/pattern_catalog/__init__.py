"""Pattern Catalog - Data Mapper and Repository patterns over a User aggregate.

Key Components:
    - domain: User aggregate, input values, repository contract, exceptions
    - application: user service, DTOs and mappers
    - infrastructure: in-memory repository and logging
    - config: configuration schemas and loading
    - cli: command line demonstrations
"""

__version__ = "1.0.0"
