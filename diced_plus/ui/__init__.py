"""
UI Layer - 用户界面层

UI层可以访问应用层和核心层。
"""
