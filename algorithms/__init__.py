"""
Algorithms package for the Banker's Algorithm Learning Tool.
Contains need derivation, input validation and the Banker's safety algorithm.
"""
