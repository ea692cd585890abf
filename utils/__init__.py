"""
Utilities package for the Banker's Algorithm Learning Tool.
Contains the scenario loader and the step logger.
"""
