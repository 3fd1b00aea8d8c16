import os

# 测试使用共享连接的内存 SQLite，须在导入 cgpa_api 之前设置
os.environ["DATABASE_URI"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")
