"""配置常量模块 -- Slack 平台固定限制"""

# 单条消息最多 attachments 数
MAX_ATTACHMENTS_COUNT: int = 100

# footer 文本最大字符数
MAX_FOOTER_CHARACTER_LENGTH: int = 300

# 动态日期指令中 epoch 的最小位数（不足补零）
DATE_EPOCH_MIN_DIGITS: int = 8
