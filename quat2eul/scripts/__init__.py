"""
Command line front ends for quat2eul.
"""
