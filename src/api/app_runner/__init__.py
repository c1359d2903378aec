"""
どこで: `api.app_runner` サブパッケージ。
何を: `api.app.run_app` から使う設定解決ヘルパを提供。
なぜ: ランナー本体を薄く保ち、GUI を起動せずにテストできる部分を切り出すため。
"""
