# Store package init
"""
Blog Backend - Data Access Layer
=================================

What:  The Post Store: the only code that talks SQL.
How:   `PostStore` is the interface the services depend on;
       `SqlAlchemyPostStore` implements it over an AsyncSession.
       Routes receive a store through the `get_post_store` dependency,
       which tests override with doubles.
"""
