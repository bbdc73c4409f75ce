"""
Складання залежностей рушія цін.
"""
