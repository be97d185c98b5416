"""
Answer templates used when the generative source is unavailable, and the
labels used when both sources are merged.
"""

NO_REFERENCES_TEXT = "未找到相关食谱参考。"

INGREDIENT_REFERENCES_HEADING = "## API食谱参考"
DISH_REFERENCES_HEADING = "## 参考食谱信息"

NUTRITION_TIPS_UNAVAILABLE = "营养分析暂不可用"

INGREDIENT_OVERVIEW_HEADING = "# 食材分析与推荐"

INGREDIENT_OVERVIEW_TEMPLATE = INGREDIENT_OVERVIEW_HEADING + """

## 食材概述
您提供的食材：{ingredients}

这些食材可以搭配出营养丰富、口感多样的菜品。

## 参考食谱

{references}

## 简单制作建议
1. **清炒类**：主要食材切块，大火快炒，保留口感
2. **汤品类**：加水慢煮，做成适合全家的汤品
3. **焖烧类**：小火焖煮，让食材充分入味

*注：当前显示基础推荐，如需个性化专业建议，请配置完整服务。*"""

DISH_GUIDE_TEMPLATE = """# {dish_name} 制作指南

## 菜品介绍
{dish_name}是一道经典菜品，具有独特的风味。

## 基础制作方法
1. **准备工作**：清洗并处理所有食材，按需要改刀切配
2. **烹饪过程**：热锅下油，按顺序下入食材，适时调味
3. **完成装盘**：调整最终口味后装盘

## 参考食谱

{references}

*注：当前显示基础制作指南，如需详细专业指导，请配置完整服务。*"""

INGREDIENT_SEPARATOR = "、"
