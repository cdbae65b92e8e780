"""
Property Tests - 性质测试

该目录包含基于hypothesis的性质测试，验证牌组操作的数学不变量.

Test Structure:
    test_deck_properties.py: 洗牌守恒、分牌前缀、加入/取出互逆
"""
