"""Use-case layer wrapping the persistence ports.

Each callable delegates to a service port and turns ``DbError`` into a
user-presentable ``UseCaseError`` so controllers only handle one error type.
"""
