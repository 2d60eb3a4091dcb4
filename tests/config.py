from libb import Setting

Setting.unlock()

h2 = Setting()
h2.dialect = 'h2'
h2.cache_statements = True
h2.cache_maxsize = 64

postgresql = Setting()
postgresql.dialect = 'postgresql'
postgresql.cache_statements = False

Setting.lock()
