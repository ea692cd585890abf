"""
Analysis package for the Banker's Algorithm Learning Tool.
Contains trace rendering and quiz grading for safety check results.
"""
