"""
JavaScript 脚本存储模块 - 基础设施层实现

集中管理在页面中执行的 JavaScript 代码。
所有脚本都以"函数体"的形式提交（run_js 会包一层函数），
因此可以直接使用 return 返回结果。

模块结构:
- VERTICAL_ONLY_CSS: 禁止横向滚动的样式注入脚本（无返回值）
- dom_enumerator_js: 全量 DOM 元素枚举脚本（返回 tag|id|class|text 字符串数组）
"""

from typing import Final

from domlens.domain.entities import FIELD_DELIMITER


class ScriptStore:
    """
    JavaScript 脚本存储

    脚本在导入时即固定，运行期不可修改。
    """

    # ============================================================
    # 纵向布局样式注入
    # ============================================================
    VERTICAL_ONLY_CSS: Final[str] = """
    const style = document.createElement('style');
    style.textContent = `
      html, body {
        overflow-x: hidden !important;
        overscroll-behavior-x: none;
      }
      * {
        max-width: 100vw !important;
        box-sizing: border-box;
      }
    `;
    document.head.appendChild(style);
    """

    # ============================================================
    # DOM 元素枚举
    # ============================================================
    _DOM_ENUMERATOR_TEMPLATE: Final[str] = """
    const all = document.getElementsByTagName('*');
    const elements = [];
    for (let i = 0; i < all.length; i++) {
        const el = all[i];
        const tagName = el.tagName;
        const id = el.getAttribute('id') || '';
        const className = el.getAttribute('class') || '';
        const text = (el.textContent || '').trim().slice(0, __LIMIT__);
        elements.push([tagName, id, className, text].join('__DELIM__'));
    }
    return elements;
    """

    @classmethod
    def dom_enumerator_js(cls, limit: int = 80) -> str:
        """
        生成 DOM 枚举脚本

        Args:
            limit: 文本预览最大长度

        Returns:
            JavaScript 代码字符串
        """
        if limit < 0:
            raise ValueError(f"text limit must be non-negative, got {limit}")
        return (cls._DOM_ENUMERATOR_TEMPLATE
                .replace('__LIMIT__', str(int(limit)))
                .replace('__DELIM__', FIELD_DELIMITER))
