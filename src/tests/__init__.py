import pytest


class MyTest:
    @pytest.fixture(autouse=True)
    def load_typextra(self, typextra_env):
        from typextra.config import get_config

        # 清除缓存，使每个测试都按当前环境变量读取配置
        get_config.cache_clear()
        yield
        get_config.cache_clear()
