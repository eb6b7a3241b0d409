"""查询字符串构建使用示例.

本示例展示如何使用 restflow 构建 PostgREST 风格的查询字符串:
1. 字段过滤与取反
2. 逻辑嵌套 (and/or/not)
3. 排序、字段选择与分页
"""

from restflow import OrderBuilder, endpoint


# ==================== 示例 1: 字段过滤 ====================
def example_filters():
    """示例: 基本过滤条件.

    场景: 查询 18 岁以上、名字包含 john（不区分大小写）、且 id 不在黑名单中的用户
    """
    query = (
        endpoint("people")
        .property("age").greater_than(18)
        .property("name").insensitive.like("*john*")
        .property("id").not_.in_(3, 7, 9)
    )

    print(query.to_query_string())
    # people?age=gt.18&name=ilike.*john*&id=not.in.(3,7,9)


# ==================== 示例 2: 逻辑嵌套 ====================
def example_logical_nesting():
    """示例: 使用逻辑组合构建复杂查询.

    场景: 查询满足以下任一条件的学生:
    - grade >= 90
    - (age < 18 且 不是 (status = inactive 或 status = banned))
    """
    query = endpoint("students").or_(
        lambda e: e.property("grade").greater_than_or_equal(90).and_(
            lambda a: a.property("age").less_than(18).not_.or_(
                lambda n: n.property("status").equals("inactive")
                .property("status").equals("banned")
            )
        )
    )

    print(query.to_query_string())
    # students?or=(grade.gte.90,and(age.lt.18,not.or(status.eq.inactive,status.eq.banned)))


# ==================== 示例 3: 排序与分页 ====================
def example_order_and_pagination():
    """示例: 字段选择、排序、分页."""
    query = (
        endpoint("articles")
        .select("id", "title", "created_at")
        .where("title", "icontains", "*python*")
        .order(lambda o: o.property("created_at").descending().nulls_last().property("id").ascending())
        .limit(20)
        .offset(40)
    )

    print(query.to_query_string())
    # articles?select=id,title,created_at&title=ilike.*python*&order=created_at.desc.nullslast,id.asc&limit=20&offset=40


# ==================== 示例 4: 从字段列表构建排序 ====================
def example_order_from_fields():
    """示例: 使用 "-field" 约定构建排序."""
    ordering = OrderBuilder.from_fields(["-score", "name"])
    query = endpoint("players").order(lambda o: ordering)

    print(query.to_query_string())
    # players?order=score.desc,name.asc


if __name__ == "__main__":
    example_filters()
    example_logical_nesting()
    example_order_and_pagination()
    example_order_from_fields()
