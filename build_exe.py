import PyInstaller.__main__
import os

from domlens import __version__

NAME = f"DomLens_v{__version__}"

print(f"🚀 开始构建 {NAME} ...")

# 1. 配置参数（命令行程序，保留控制台窗口以查看 DOM 清单输出）
params = [
    'main.py',
    f'--name={NAME}',
    '--onefile',
    '--console',
    f'--add-data=domlens{os.pathsep}domlens',   # 包含完整 domlens 源码
    '--collect-all=DrissionPage',              # 收集 DrissionPage 资源
    '--hidden-import=domlens.launcher',
    '--clean',
    '--distpath=dist',
    '--workpath=build',
    '--specpath=.',
    '--noconfirm',
]

# 2. 执行构建
PyInstaller.__main__.run(params)

print(f"✅ 构建完成！文件位于 dist/{NAME}")
