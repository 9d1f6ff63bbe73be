"""
基于属性的测试

使用hypothesis验证抽牌的守恒性质，并用卡方检验验证抽样的均匀性。
"""
