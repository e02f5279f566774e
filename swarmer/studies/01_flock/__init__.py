"""
Study 01: Flock

Hundreds of swarmers, four forces, one box.

Questions to explore:
- How quickly do local groups form?
- Do groups merge or stay apart?
- How do trees split and rejoin a flock?
"""
