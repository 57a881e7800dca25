"""
padded_cell core: pure data and algorithms (no transformation calls).

- core/edit_distance : O(NP) edit distance, nearest candidate
- core/result        : classified result variants and derived operations
- core/payload       : JSON-ready view of a result
"""
