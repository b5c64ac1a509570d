"""
Role draft service: stored role preferences and a greedy, fill-aware role draft for five-player teams.
"""
