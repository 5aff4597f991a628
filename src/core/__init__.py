"""
Core value types, arithmetic kernels, and invariants.

Arbitrary-precision signed decimal integers: representation, parsing,
comparison, addition/subtraction and schoolbook multiplication.
"""
