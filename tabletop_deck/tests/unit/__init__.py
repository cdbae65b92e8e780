"""
Unit Tests - 单元测试

覆盖点数、花色、卡牌、牌组、异常以及应用层服务.
"""
