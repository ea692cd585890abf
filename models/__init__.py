"""
Models package for the Banker's Algorithm Learning Tool.
Contains the Process and Scenario records and the algorithm result types.
"""
