"""Display strings for the CLI. Unknown keys render as themselves."""

EN: dict[str, str] = {
    "QUEST LOG": "QUEST LOG",
    "COMPLETED LOG": "COMPLETED LOG",
    "MATRIX": "MATRIX",
    "Do Now": "DO NOW",
    "Plan": "PLAN",
    "Delegate": "DELEGATE",
    "Later": "LATER",
    "Created Time": "Created Time",
    "Due Date": "Due Date",
    "Task Name": "Task Name",
    "SORT BY": "SORT BY",
    "Music": "Music",
    "Sound": "Sound",
    "Notifications": "Notifications",
    "Language": "Language",
    "Data file": "Data file",
    "On": "On",
    "Off": "Off",
    "No active quests!": "No active quests!",
    "No completed quests yet!": "No completed quests yet!",
    "Empty": "Empty",
    "Total": "Total",
    "Done": "Done",
    "Active": "Active",
    "RESET_WARNING": "Are you sure you want to delete all data? This cannot be undone.",
    "ABANDON_WARNING": "Are you sure you want to abandon this quest? This cannot be undone.",
    "TITLE_ELITE_VANGUARD": "Elite Vanguard",
    "VIBE_ELITE_VANGUARD": "\"I don't just put out fires; I build fireproof houses.\"",
    "TITLE_CHAOS_SURFER": "Chaos Surfer",
    "VIBE_CHAOS_SURFER": "\"Is it 5 PM yet? I've done 100 things and 90 of them were screaming at me.\"",
    "TITLE_DEADLINE_DAREDEVIL": "Deadline Daredevil",
    "VIBE_DEADLINE_DAREDEVIL": "\"Work hard, play hard, panic harder.\"",
    "TITLE_GRANDMASTER": "Grandmaster Strategist",
    "VIBE_GRANDMASTER": "\"I planned for this crisis three weeks ago.\"",
    "TITLE_BENEVOLENT_RULER": "The Benevolent Ruler",
    "VIBE_BENEVOLENT_RULER": "\"I'm trying to build an empire here, but sure, I'll fix your printer.\"",
    "TITLE_PHILOSOPHER_KING": "Philosopher King",
    "VIBE_PHILOSOPHER_KING": "\"I have a 5-year plan, but first, let me watch this cat video for inspiration.\"",
    "TITLE_SPINNING_TOP": "Spinning Top",
    "VIBE_SPINNING_TOP": "\"So much speed, so little destination.\"",
    "TITLE_SIDE_QUEST_HERO": "Side-Quest Hero",
    "VIBE_SIDE_QUEST_HERO": "\"The world needs saving, but this villager needs 5 apples right now.\"",
    "TITLE_NPC_ENERGY": "NPC Energy",
    "VIBE_NPC_ENERGY": "\"I'm just here to fill the space.\"",
    "TITLE_CLUTCH_GAMER": "The Clutch Gamer",
    "VIBE_CLUTCH_GAMER": "\"I work best when I have exactly 5 minutes left.\"",
    "TITLE_DAYDREAM_BELIEVER": "Daydream Believer",
    "VIBE_DAYDREAM_BELIEVER": "\"My to-do list is a wish list.\"",
    "TITLE_POTATO_MODE": "Potato Mode Activated",
    "VIBE_POTATO_MODE": "\"Can I do this tomorrow? Or never? Never works for me.\"",
}

ZH: dict[str, str] = {
    "QUEST LOG": "任务日志",
    "COMPLETED LOG": "完成记录",
    "MATRIX": "四象限",
    "Do Now": "马上做",
    "Plan": "计划做",
    "Delegate": "授权做",
    "Later": "稍后做",
    "Created Time": "创建时间",
    "Due Date": "截止日期",
    "Task Name": "任务名称",
    "SORT BY": "排序",
    "Music": "背景音",
    "Sound": "音效",
    "Notifications": "提醒",
    "Language": "语言",
    "Data file": "数据文件",
    "On": "开",
    "Off": "关",
    "No active quests!": "没有进行中的任务！",
    "No completed quests yet!": "还没有完成的任务！",
    "Empty": "空",
    "Total": "总计",
    "Done": "完成",
    "Active": "进行中",
    "RESET_WARNING": "确定要删除所有数据吗？此操作无法撤销。",
    "ABANDON_WARNING": "确定要放弃这个任务吗？此操作无法撤销。",
    "TITLE_ELITE_VANGUARD": "精英先锋",
    "VIBE_ELITE_VANGUARD": "“我不只负责救火，我还建造防火屋。”",
    "TITLE_CHAOS_SURFER": "混沌冲浪手",
    "VIBE_CHAOS_SURFER": "“五点了吗？我做了100件事，其中90件都在对我尖叫。”",
    "TITLE_DEADLINE_DAREDEVIL": "死线狂人",
    "VIBE_DEADLINE_DAREDEVIL": "“努力工作，尽情玩耍，更加慌张。”",
    "TITLE_GRANDMASTER": "战略大师",
    "VIBE_GRANDMASTER": "“这场危机我三周前就计划好了。”",
    "TITLE_BENEVOLENT_RULER": "仁慈的君主",
    "VIBE_BENEVOLENT_RULER": "“我在建立帝国，不过好吧，我来修你的打印机。”",
    "TITLE_PHILOSOPHER_KING": "哲学家国王",
    "VIBE_PHILOSOPHER_KING": "“我有五年计划，但先让我看个猫咪视频找找灵感。”",
    "TITLE_SPINNING_TOP": "陀螺",
    "VIBE_SPINNING_TOP": "“速度很快，方向很少。”",
    "TITLE_SIDE_QUEST_HERO": "支线任务英雄",
    "VIBE_SIDE_QUEST_HERO": "“世界需要拯救，但这个村民现在需要5个苹果。”",
    "TITLE_NPC_ENERGY": "NPC 能量",
    "VIBE_NPC_ENERGY": "“我只是来凑数的。”",
    "TITLE_CLUTCH_GAMER": "关键时刻玩家",
    "VIBE_CLUTCH_GAMER": "“只剩5分钟的时候我状态最好。”",
    "TITLE_DAYDREAM_BELIEVER": "白日梦信徒",
    "VIBE_DAYDREAM_BELIEVER": "“我的待办清单是愿望清单。”",
    "TITLE_POTATO_MODE": "土豆模式开启中",
    "VIBE_POTATO_MODE": "“能明天做吗？或者这辈子都不做？我觉得后者不错。”",
}

TABLES = {"en": EN, "zh": ZH}


def localize(key: str, language: str = "en") -> str:
    return TABLES.get(language, EN).get(key, key)
