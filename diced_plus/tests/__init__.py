"""
diced-plus 测试包
"""
