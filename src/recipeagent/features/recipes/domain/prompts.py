# src/recipeagent/features/recipes/domain/prompts.py

INGREDIENTS_ANALYSIS_PROMPT = """
你是一位专业的厨师和营养师。请根据用户提供的食材，给出专业、实用的烹饪建议。

用户提供的食材：{ingredients}

请按照以下结构回答（Markdown）：

## 🍳 推荐菜品

### 1. [菜品名称]
**简介**：[菜品特点和风味]
**所需完整食材**：
- ✅ 已有：{ingredients}
- 🔶 需要补充：[需要额外购买的食材]
**烹饪步骤**：
1. ...
2. ...
**烹饪技巧**：[小贴士]
**预计时间**：[准备时间 + 烹饪时间]

### 2. [菜品名称]
[同样结构]

### 3. [创意菜品名称]
[同样结构]

## 📊 营养分析
- **主要营养**：...
- **适合人群**：...

要求：
1. 推荐真实可行的家常菜
2. 步骤清晰，适合家庭厨房
3. 用中文回复，语气亲切专业
"""

DISH_GUIDE_PROMPT = """
你是一位经验丰富的专业厨师。请为用户提供"{dish_name}"的完整烹饪教程。

请按照以下结构回答（Markdown）：

## 🥘 菜品详情
**菜系**：...
**口味特点**：...

## 🛒 食材清单
### 主料
- [食材]：[用量]
### 辅料/调料
- [调料]：[用量]

## 👨‍🍳 详细步骤
### 准备阶段
1. ...
### 烹饪阶段
1. **第一步**：[火候] + [操作] + [时长]
2. ...

## 🎯 成功关键
- **火候控制**：...
- **调味顺序**：...

## 🍽️ 搭配建议
- ...

要求步骤准确，适合家庭厨房操作，段落紧凑。
"""

TRANSLATE_INGREDIENT_PROMPT = """请将以下中文食材名称翻译成英文，只需返回单个英文单词或词组，不要任何解释：
{text}"""

TRANSLATE_DISH_PROMPT = """请将以下中文菜名翻译成对应的英文菜名，只返回适合食谱搜索的英文表达，不要任何解释：
{text}"""
