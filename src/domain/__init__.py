"""Domain layer: account models, capability contracts and the signup use case.

- **models**: Immutable account input and stored account values
- **protocols**: Ports the core depends on (validator, hasher, repository)
- **add_account**: The account creation use case

Nothing in this package imports FastAPI, SQLAlchemy or any hashing or
validation library; adapters for those live in the infrastructure layer.
"""
